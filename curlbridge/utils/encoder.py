import datetime
import decimal
import json
from typing import Any
import uuid


class CurlbridgeJSONEncoder(json.JSONEncoder):
    """Custom JSON encoder adding support for additional python data types.

    Usage:

    .. code::python

       json.dumps(my_value, cls=CurlbridgeJSONEncoder)
    """

    def default(self, obj) -> Any:
        """Encode objects to JSON values.

        Args:
            obj: The object to encode.

        Return:
            A valid type suitable for JSON encoding.
        """
        if isinstance(obj, decimal.Decimal):
            # Keep numbers as numbers so request payloads stay typed.
            return int(obj) if obj == obj.to_integral_value() else float(obj)
        elif isinstance(obj, (datetime.datetime, datetime.date)):
            return obj.isoformat()
        elif isinstance(obj, uuid.UUID):
            return str(obj)
        elif isinstance(obj, (set, frozenset)):
            return list(obj)
        else:
            try:
                return super().default(obj)
            except TypeError:
                return str(obj)
