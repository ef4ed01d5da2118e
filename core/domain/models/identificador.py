from bson import ObjectId


def nuevo_id() -> str:
    """
    Genera un identificador nuevo con el esquema nativo del almacén (ObjectId).
    """
    return str(ObjectId())


def es_id_valido(tarea_id: object) -> bool:
    # ObjectId.is_valid acepta bytes de 12 caracteres; solo admitimos la forma hex.
    return (
        isinstance(tarea_id, str)
        and len(tarea_id) == 24
        and ObjectId.is_valid(tarea_id)
    )
