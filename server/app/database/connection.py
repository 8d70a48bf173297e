import logging

from pymongo import MongoClient

from app.config import MONGODB_URI, DB_NAME

logger = logging.getLogger(__name__)

def create_client() -> MongoClient:
    """Build the MongoClient; tz_aware so stored UTC timestamps come back with their offset"""
    return MongoClient(MONGODB_URI, serverSelectionTimeoutMS=5000, tz_aware=True)

client = None
db = None

# Initialize database connection with error handling
try:
    client = create_client()
    db = client[DB_NAME]

    # Test connection
    client.admin.command('ping')
    logger.info(f"Database connection successful: {DB_NAME}")
except Exception as e:
    logger.warning(f"Database connection failed: {e}")
    if client is not None:
        client.close()
    client = None
    db = None


def close_connection():
    """Close the shared MongoClient, if one was opened"""
    if client is not None:
        client.close()
        logger.info("Database connection closed")
