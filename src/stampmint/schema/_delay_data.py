from typing import TypedDict


class DelayData(TypedDict):
    delay: int
