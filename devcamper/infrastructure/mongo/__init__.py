"""
MongoDB adapters.

Each collection is wrapped in a MongoDocumentStore paired with the
document schema that validates its writes.
"""

BOOTCAMPS_COLLECTION = "bootcamps"
USERS_COLLECTION = "users"
