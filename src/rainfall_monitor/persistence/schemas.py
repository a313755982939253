"""Collection validator for the shared `{id, data, timestamp}` records."""

SCADA_RECORD_SCHEMA = {
    "$jsonSchema": {
        "bsonType": "object",
        "required": ["id", "data", "timestamp"],
        "properties": {
            "_id": {"bsonType": "objectId"},
            "id": {"bsonType": "string"},
            "data": {"bsonType": "object"},
            "timestamp": {"bsonType": ["long", "int", "double"], "minimum": 0},
        }
    }
}


def create_collection_with_validation(db, name: str):
    existing = db.list_collection_names()
    if name not in existing:
        db.create_collection(name, validator=SCADA_RECORD_SCHEMA)
    else:
        db.command("collMod", name, validator=SCADA_RECORD_SCHEMA)
