#!/usr/bin/env python3
"""
Database initialization module for the contact backend.
Ensures the collections used by the service exist with their indexes.
Safe to run on every startup; it only creates what is missing.
"""

import logging
from datetime import datetime, timezone
from pymongo.errors import PyMongoError

from contact_api.db.contact_store import CONTACTS_COLLECTION

# Set up logger
logger = logging.getLogger(__name__)

REQUIRED_COLLECTIONS = [
    {
        "name": CONTACTS_COLLECTION,
        "description": "Stores contact form submissions",
        "indexes": [
            {"keys": [("createdAt", -1)], "unique": False},
            {"keys": [("email", 1)], "unique": False},
        ]
    },
]


async def collection_exists(db, collection_name):
    """
    Check if a collection exists in the database.

    Args:
        db: MongoDB database connection
        collection_name (str): Name of the collection to check

    Returns:
        bool: True if collection exists, False otherwise
    """
    try:
        collections = await db.list_collection_names()
        return collection_name in collections
    except PyMongoError as e:
        logger.error(f"Error checking if collection '{collection_name}' exists: {str(e)}")
        return False


async def create_collection_with_indexes(db, collection_config):
    """
    Create a collection with its required indexes if it doesn't exist.

    Returns:
        bool: True if successful, False otherwise
    """
    collection_name = collection_config["name"]
    description = collection_config.get("description", "")

    try:
        if await collection_exists(db, collection_name):
            logger.info(f"Collection '{collection_name}' already exists")
        else:
            logger.info(f"Creating collection '{collection_name}': {description}")
            await db.create_collection(collection_name)

        collection = db[collection_name]
        for index_config in collection_config.get("indexes", []):
            keys = index_config["keys"]
            options = {k: v for k, v in index_config.items() if k != "keys"}
            try:
                await collection.create_index(keys, **options)
                logger.debug(f"Index {keys} ensured for '{collection_name}'")
            except PyMongoError as e:
                logger.warning(f"Failed to create index {keys} for '{collection_name}': {str(e)}")

        return True

    except PyMongoError as e:
        logger.error(f"Failed to create collection '{collection_name}': {str(e)}")
        return False


async def initialize_database(db):
    """
    Create all required collections and indexes.

    Returns:
        bool: True if every collection was initialized
    """
    start_time = datetime.now(timezone.utc)
    logger.info(f"Initializing database: {db.name}")

    results = [await create_collection_with_indexes(db, config) for config in REQUIRED_COLLECTIONS]
    error_count = results.count(False)
    duration = (datetime.now(timezone.utc) - start_time).total_seconds()

    if error_count == 0:
        logger.info(f"Database initialization completed: {len(results)} collections in {duration:.2f}s")
        return True

    logger.warning(f"Database initialization completed with {error_count} errors in {duration:.2f}s")
    return False


async def verify_database_setup(db):
    """
    Verify that all required collections exist.

    Returns:
        dict: Verification results with details about each collection
    """
    verification_results = {
        "database_name": db.name,
        "collections": {},
        "overall_status": "unknown"
    }
    all_good = True

    for collection_config in REQUIRED_COLLECTIONS:
        collection_name = collection_config["name"]
        try:
            if await collection_exists(db, collection_name):
                collection = db[collection_name]
                doc_count = await collection.count_documents({})
                indexes = await collection.list_indexes().to_list(None)
                verification_results["collections"][collection_name] = {
                    "exists": True,
                    "document_count": doc_count,
                    "indexes": [idx.get("name", "unknown") for idx in indexes],
                    "status": "OK"
                }
                logger.info(f"{collection_name}: {doc_count} documents, {len(indexes)} indexes")
            else:
                verification_results["collections"][collection_name] = {
                    "exists": False,
                    "status": "MISSING"
                }
                logger.error(f"{collection_name}: Collection does not exist")
                all_good = False
        except PyMongoError as e:
            verification_results["collections"][collection_name] = {
                "exists": "unknown",
                "error": str(e),
                "status": "ERROR"
            }
            logger.error(f"{collection_name}: Error during verification - {str(e)}")
            all_good = False

    verification_results["overall_status"] = "PASS" if all_good else "FAIL"
    return verification_results


if __name__ == "__main__":
    import asyncio
    import sys

    from contact_api.core.config import get_settings
    from contact_api.db.mongo import connect

    async def main():
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        settings = get_settings()
        client, db = connect(settings.effective_mongo_uri, settings.mongo_db_name)
        try:
            init_success = await initialize_database(db)
            verification_results = await verify_database_setup(db)
        finally:
            client.close()

        print(f"Initialization: {'SUCCESS' if init_success else 'FAILED'}")
        print(f"Verification: {verification_results['overall_status']}")
        for name, info in verification_results["collections"].items():
            print(f"  {name}: {info['status']}")

        return init_success and verification_results["overall_status"] == "PASS"

    success = asyncio.run(main())
    sys.exit(0 if success else 1)
