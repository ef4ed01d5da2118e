from peewee import CharField, DateTimeField, Model
from infrastructure.peewee.session.db import db

class TareaModel(Model):
    id = CharField(primary_key=True, max_length=24)
    title = CharField(max_length=200)
    status = CharField(max_length=16, default="Pending")
    # Fechas naive en UTC: el adaptador añade la zona al leer.
    created_at = DateTimeField()
    updated_at = DateTimeField()

    class Meta:
        database = db
        table_name = "tasks"
        indexes = (
            (("status", "created_at"), False),
        )
