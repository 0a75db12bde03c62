from datetime import date


class IsoDateConverter:
    """Workshop dates in URLs: ``2026-10-19``"""

    regex = r'\d{4}-\d{2}-\d{2}'

    def to_python(self, value: str) -> date:
        return date.fromisoformat(value)

    def to_url(self, value) -> str:
        if isinstance(value, date):
            return value.isoformat()
        return str(value)
