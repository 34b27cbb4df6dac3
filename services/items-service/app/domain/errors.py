# created by emeday 2025

class ItemNotFoundError(LookupError):
    """El id solicitado no corresponde a ningún item del store."""

    def __init__(self, raw_id: object):
        super().__init__(f"Item {raw_id!r} no encontrado")
        self.raw_id = raw_id
