from pymongo.database import Database
from pymongo.errors import CollectionInvalid, PyMongoError

from .logger import get_logger
from .schema import books_schema

logger = get_logger(__name__)


def create_collections(db: Database, name: str = "books") -> bool:
    """Create the books collection and attach its validator.

    Returns False when the validator could not be applied; the collection
    itself is still usable without it.
    """
    try:
        db.create_collection(name)
    except CollectionInvalid:
        # already exists
        pass

    try:
        db.command("collMod", name, validator={"$jsonSchema": books_schema}, validationLevel="moderate")
    except PyMongoError as e:
        logger.warning("⚠️ Failed to apply validator to '%s': %s", name, e)
        return False
    logger.info("✅ Created/updated collection '%s' with validation.", name)
    return True
