from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class TapTempoConfig(BaseModel):
    """Configuration for the tap tempo accumulator.

    Only edge-case policy lives here; the tempo math itself has no knobs.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    zero_interval: Literal["infinite", "absent"] = Field(
        default="infinite",
        description=(
            "What to report when the first and latest tap share the same "
            "millisecond. 'infinite' returns float('inf'), the literal result "
            "of dividing by zero elapsed minutes. 'absent' returns None."
        ),
    )
