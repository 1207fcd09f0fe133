from selector_kit.objects.rectangle import Rectangle
from selector_kit.objects.serialization import SchemaMismatch, from_json, to_json

__all__ = ["Rectangle", "SchemaMismatch", "from_json", "to_json"]
