"""Convert WDK BLAST question params into a multi-blast job creation body.

The multi-blast UI builds the same body from its own form state, so the two
must agree on every member name and value; users exporting a multi-blast job
to WDK expect identical results.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from veupath_multiblast.domain.blast.params import (
    BlastParam,
    get_boolean_value,
    get_int_value,
    get_normalized_value,
)
from veupath_multiblast.domain.blast.targets import BlastTarget, build_targets
from veupath_multiblast.domain.blast.tools import (
    BlastTool,
    build_tool_config,
    parse_blast_tool,
)
from veupath_multiblast.platform.logging import get_logger
from veupath_multiblast.platform.types import JSONObject, ParamValues

logger = get_logger(__name__)


class LowComplexityFilter(BaseModel):
    """``dust`` (nucleotide) or ``seg`` (protein) masking switch."""

    enabled: bool


class BlastJobConfig(BaseModel):
    """Where and what to search."""

    site: str
    targets: list[BlastTarget]
    query: str
    add_to_user_collection: bool = Field(default=False, alias="addToUserCollection")

    model_config = {"populate_by_name": True}


class BlastQueryConfig(BaseModel):
    """How to search; optional members depend on the tool."""

    tool: BlastTool
    e_value: str = Field(alias="eValue")
    soft_masking: bool = Field(alias="softMasking")
    lowercase_masking: bool = Field(alias="lowercaseMasking")
    max_target_sequences: int = Field(alias="maxTargetSequences")
    max_hsps: int = Field(alias="maxHSPs")

    task: str | None = None
    gap_open: int | None = Field(default=None, alias="gapOpen")
    gap_extend: int | None = Field(default=None, alias="gapExtend")
    reward: int | None = None
    penalty: int | None = None
    word_size: int | None = Field(default=None, alias="wordSize")
    matrix: str | None = None
    comp_based_stats: str | None = Field(default=None, alias="compBasedStats")
    dust: LowComplexityFilter | None = None
    seg: LowComplexityFilter | None = None

    model_config = {"populate_by_name": True}


class BlastCreateJobBody(BaseModel):
    """Request body of the multi-blast ``POST /jobs`` endpoint."""

    job_config: BlastJobConfig = Field(alias="jobConfig")
    blast_config: BlastQueryConfig = Field(alias="blastConfig")

    model_config = {"populate_by_name": True}

    def to_json(self) -> JSONObject:
        """Serialize with wire names, omitting members the tool does not use."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def build_blast_job_config(project_id: str, params: ParamValues) -> BlastJobConfig:
    return BlastJobConfig(
        site=project_id,
        targets=build_targets(params),
        query=get_normalized_value(params, BlastParam.QUERY_SEQUENCE),
        add_to_user_collection=False,
    )


def build_blast_query_config(params: ParamValues) -> BlastQueryConfig:
    """Build ``blastConfig``: common members plus the selected tool's members.

    :param params: Raw param values.
    :returns: Query config.
    :raises UnknownBlastToolError: If ``BlastAlgorithm`` names an unknown tool.
    """
    tool_name = get_normalized_value(params, BlastParam.ALGORITHM)

    common: JSONObject = {
        "eValue": get_normalized_value(params, BlastParam.EXPECTATION_VALUE),
        "softMasking": get_boolean_value(params, BlastParam.SOFT_MASK),
        "lowercaseMasking": get_boolean_value(params, BlastParam.LOWER_CASE_MASK),
        "maxTargetSequences": get_int_value(params, BlastParam.NUM_QUERY_RESULTS),
        "maxHSPs": get_int_value(params, BlastParam.MAX_MATCHES_QUERY_RANGE),
    }

    tool = parse_blast_tool(tool_name)
    return BlastQueryConfig.model_validate(
        {**build_tool_config(tool, params), **common, "tool": tool}
    )


def build_blast_create_job_body(
    project_id: str, params: ParamValues
) -> BlastCreateJobBody:
    """Build the multi-blast job creation body for a WDK BLAST search.

    Either the whole body is built or an error propagates; nothing is
    defaulted. Only an unknown tool is a user error, other failures mean the
    question form let through values it should have rejected.

    :param project_id: Submitting site (e.g. ``"PlasmoDB"``).
    :param params: Raw WDK param values keyed by param name.
    :returns: Job body; call ``to_json()`` for the wire document.
    :raises UnknownBlastToolError: If ``BlastAlgorithm`` names an unknown tool.
    :raises MissingParameterError: If a param the tool reads is absent.
    :raises MalformedNumericError: If a numeric param does not parse.
    """
    body = BlastCreateJobBody(
        job_config=build_blast_job_config(project_id, params),
        blast_config=build_blast_query_config(params),
    )
    logger.debug(
        "Built multi-blast job body",
        site=project_id,
        tool=body.blast_config.tool.value,
        targets=len(body.job_config.targets),
    )
    return body
