from __future__ import annotations

from typing import Union

#: Numeric edge weight / accumulated path distance.
Cost = Union[int, float]
