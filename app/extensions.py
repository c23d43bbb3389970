from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine
import sqlite3

db = SQLAlchemy()


# SQLite não aplica chaves estrangeiras por padrão; sem isso não há ON DELETE CASCADE
@event.listens_for(Engine, "connect")
def ativar_chaves_estrangeiras(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
