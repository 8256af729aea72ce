from typing import Mapping, Sequence, Union

ContextData = Union[
    None,
    bool,
    int,
    float,
    str,
    bytes,
    Sequence["ContextData"],
    Mapping[Union[str, int], "ContextData"],
]
