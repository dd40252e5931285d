from typing import Annotated

from pydantic import Field

# SQLite INTEGER is a signed 64-bit value
RowId = Annotated[int, Field(ge=1, le=2**63 - 1)]
