"""
conftest.py — Fixtures compartidas para la suite pytest
-------------------------------------------------------
- mongo_db: base mongomock nueva por test (sin servidor real)
- client: TestClient sobre create_app(database=mongo_db), con filtros y
  documentos codificados en BSON como hace pymongo (mongomock no lo hace)
"""

import os

# Antes de importar la app: menos ruido en logs y sin hashing
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("PASSWORD_HASHING", "false")

import bson
import mongomock
import pytest
from fastapi.testclient import TestClient

from main import create_app


class BsonEncodingCollection:
    """Envuelve una colección mongomock y codifica en BSON antes de cada operación."""

    def __init__(self, collection):
        self._collection = collection

    def __getattr__(self, name):
        return getattr(self._collection, name)

    def find(self, filter=None, *args, **kwargs):
        bson.encode(filter or {})
        return self._collection.find(filter, *args, **kwargs)

    def find_one(self, filter=None, *args, **kwargs):
        bson.encode(filter or {})
        return self._collection.find_one(filter, *args, **kwargs)

    def insert_one(self, document, *args, **kwargs):
        bson.encode(document)
        return self._collection.insert_one(document, *args, **kwargs)

    def update_one(self, filter, update, *args, **kwargs):
        bson.encode(filter)
        bson.encode(update)
        return self._collection.update_one(filter, update, *args, **kwargs)

    def delete_one(self, filter, *args, **kwargs):
        bson.encode(filter)
        return self._collection.delete_one(filter, *args, **kwargs)


class BsonEncodingDatabase:
    def __init__(self, db):
        self._db = db

    def __getitem__(self, name):
        return BsonEncodingCollection(self._db[name])

    def __getattr__(self, name):
        return getattr(self._db, name)


@pytest.fixture
def mongo_db():
    return mongomock.MongoClient()["greenGarden"]


@pytest.fixture
def client(mongo_db):
    app = create_app(database=BsonEncodingDatabase(mongo_db))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def registered_user(client):
    """Usuario registrado vía API; devuelve las credenciales usadas."""
    creds = {"email": "ana@example.com", "password": "s3cret", "name": "Ana"}
    resp = client.post("/api/register", json=creds)
    assert resp.status_code == 201
    return creds
