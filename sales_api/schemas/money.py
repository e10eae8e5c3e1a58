"""Monetary field type shared by response schemas."""
from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

# Decimal in Python, JSON number on the wire.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
