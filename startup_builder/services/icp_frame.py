"""ICP semantic frame.

Renders an ICP as the sentence "{as} at {at} are {are} using {using} to {to}".
Pure string interpolation: no trimming, truncation or escaping.
"""

from __future__ import annotations

from typing import Any, Mapping, Union

from ..schemas.icp_schema import ICP

FRAME_TEMPLATE = "{as_} at {at} are {are} using {using} to {to}"


def icp_to_frame(icp: Union[ICP, Mapping[str, Any]]) -> str:
    """Return the ICP's semantic frame.

    Accepts an ``ICP`` or a mapping keyed by JSON-LD names (``as``, ``at``, ...).
    A mapping missing one of the five clauses raises ``KeyError``.
    """
    if isinstance(icp, ICP):
        return FRAME_TEMPLATE.format(as_=icp.as_, at=icp.at, are=icp.are, using=icp.using, to=icp.to)
    return FRAME_TEMPLATE.format(
        as_=icp["as"],
        at=icp["at"],
        are=icp["are"],
        using=icp["using"],
        to=icp["to"],
    )
