"""Query-string encoding in the bracket style Canvas expects.

``urllib.parse.urlencode`` and httpx both render list values as
``include=a&include=b`` (or ``include[0]=a`` with other encoders), which
Canvas rejects. Canvas wants ``include[]=a&include[]=b`` for repeated values
and ``course[name]=N`` for nested objects.
"""

from collections.abc import Mapping


def _stringify(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _entries(value):
    if isinstance(value, Mapping):
        return value.items()
    return enumerate(value)


def encode_query(params) -> str:
    """Encode a parameter mapping into a Canvas query string.

    Top-level scalars become ``key=value``. A nested mapping, list or tuple
    becomes one ``key[index]=value`` per entry, where ``index`` is empty for
    integer (positional) keys. Values are not percent-encoded.

    Scalars go through ``str()``, so numbers and strings encode alike. Two
    types are rendered differently: booleans become ``true``/``false`` (the
    literals Canvas parses, where PHP-style encoders emit ``1`` and an empty
    string) and ``None`` becomes an empty value.

    Example:
        >>> encode_query({"a": 1, "b": ["x", "y"], "course": {"name": "N"}})
        'a=1&b[]=x&b[]=y&course[name]=N'
    """
    query = []
    for key, value in params.items():
        if isinstance(value, (Mapping, list, tuple)):
            for sub_key, sub_value in _entries(value):
                index = "" if isinstance(sub_key, int) and not isinstance(sub_key, bool) else sub_key
                query.append(f"{key}[{index}]={_stringify(sub_value)}")
        else:
            query.append(f"{key}={_stringify(value)}")
    return "&".join(query)
