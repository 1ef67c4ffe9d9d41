"""Multi-blast target databases derived from the organism/database-type params."""

from __future__ import annotations

from pydantic import BaseModel, Field

from veupath_multiblast.domain.blast.params import BlastParam, get_raw_value
from veupath_multiblast.platform.types import ParamValues

# Entries this short are organism tree placeholders, never leaf organisms.
MIN_ORGANISM_LENGTH = 4

# WDK database types whose blast database files go by another name.
TARGET_TYPE_OVERRIDES: dict[str, str] = {"PopSet": "Isolates"}


class BlastTarget(BaseModel):
    """One database the multi-blast job searches against."""

    target_display_name: str = Field(alias="targetDisplayName")
    target_file: str = Field(alias="targetFile")

    model_config = {"populate_by_name": True, "frozen": True}


def blast_target_type(wdk_target_type: str) -> str:
    """Map a WDK database type onto the suffix of its blast database files."""
    return TARGET_TYPE_OVERRIDES.get(wdk_target_type, wdk_target_type)


def build_targets(params: ParamValues) -> list[BlastTarget]:
    """Build the ``targets`` list of a multi-blast job.

    The organism param holds a comma-separated list of the organisms picked
    in the tree; each leaf organism becomes one target whose file name is the
    organism name followed by the database type (``"PopSet"`` is searched as
    ``"Isolates"``). Order follows the organism list. An empty result is
    returned as-is; the service rejects jobs without targets.

    :param params: Raw param values.
    :returns: Targets in selection order.
    """
    organisms = get_raw_value(params, BlastParam.DATABASE_ORGANISM).split(",")
    target_type = blast_target_type(get_raw_value(params, BlastParam.DATABASE_TYPE))

    return [
        BlastTarget(
            target_display_name=organism,
            target_file=organism + target_type,
        )
        for organism in organisms
        if len(organism) >= MIN_ORGANISM_LENGTH
    ]
