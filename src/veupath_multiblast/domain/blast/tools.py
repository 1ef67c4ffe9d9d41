"""BLAST tool dispatch and the tool-specific part of the multi-blast config."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from veupath_multiblast.domain.blast.params import (
    BlastParam,
    get_int_pair_value,
    get_int_value,
    get_normalized_value,
    parse_low_complexity_filter,
)
from veupath_multiblast.platform.errors import UnknownBlastToolError
from veupath_multiblast.platform.types import JSONObject, ParamValues


class BlastTool(StrEnum):
    """BLAST applications the multi-blast service runs."""

    BLASTN = "blastn"
    BLASTP = "blastp"
    BLASTX = "blastx"
    TBLASTN = "tblastn"
    TBLASTX = "tblastx"
    DELTABLAST = "deltablast"
    PSIBLAST = "psiblast"
    RPSBLAST = "rpsblast"
    RPSTBLASTN = "rpstblastn"


@dataclass(frozen=True)
class ToolLayout:
    """Which optional ``blastConfig`` members a tool carries."""

    task: bool = False
    gap_costs: bool = False
    match_mismatch: bool = False
    word_size: bool = False
    matrix: bool = False
    comp_based_stats: bool = False
    mask_key: Literal["dust", "seg"] = "seg"


_GAPPED_PROTEIN = ToolLayout(
    gap_costs=True, word_size=True, matrix=True, comp_based_stats=True
)
_TASK_PROTEIN = ToolLayout(
    task=True, gap_costs=True, word_size=True, matrix=True, comp_based_stats=True
)
_RPS = ToolLayout(comp_based_stats=True)

TOOL_LAYOUTS: dict[BlastTool, ToolLayout] = {
    BlastTool.BLASTN: ToolLayout(
        task=True,
        gap_costs=True,
        match_mismatch=True,
        word_size=True,
        mask_key="dust",
    ),
    BlastTool.BLASTP: _TASK_PROTEIN,
    BlastTool.BLASTX: _TASK_PROTEIN,
    BlastTool.TBLASTN: _TASK_PROTEIN,
    BlastTool.TBLASTX: ToolLayout(word_size=True, matrix=True),
    BlastTool.DELTABLAST: _GAPPED_PROTEIN,
    BlastTool.PSIBLAST: _GAPPED_PROTEIN,
    BlastTool.RPSBLAST: _RPS,
    BlastTool.RPSTBLASTN: _RPS,
}

# Params read for every tool, before dispatch.
COMMON_PARAMS: tuple[BlastParam, ...] = (
    BlastParam.DATABASE_TYPE,
    BlastParam.ALGORITHM,
    BlastParam.DATABASE_ORGANISM,
    BlastParam.QUERY_SEQUENCE,
    BlastParam.EXPECTATION_VALUE,
    BlastParam.NUM_QUERY_RESULTS,
    BlastParam.MAX_MATCHES_QUERY_RANGE,
    BlastParam.SOFT_MASK,
    BlastParam.LOWER_CASE_MASK,
)


def parse_blast_tool(value: str) -> BlastTool:
    """Resolve the normalized ``BlastAlgorithm`` value to a tool.

    :raises UnknownBlastToolError: If multi-blast does not run that tool.
    """
    try:
        return BlastTool(value)
    except ValueError:
        raise UnknownBlastToolError(value) from None


def tool_params(tool: BlastTool) -> list[BlastParam]:
    """Params read by a tool's config builder, beyond the common ones."""
    layout = TOOL_LAYOUTS[tool]
    needed: list[BlastParam] = []
    if layout.gap_costs:
        needed.append(BlastParam.GAP_COSTS)
    if layout.match_mismatch:
        needed.append(BlastParam.MATCH_MISMATCH_SCORE)
    if layout.word_size:
        needed.append(BlastParam.WORD_SIZE)
    if layout.matrix:
        needed.append(BlastParam.SCORING_MATRIX)
    if layout.comp_based_stats:
        needed.append(BlastParam.COMP_ADJUST)
    needed.append(BlastParam.FILTER_LOW_COMPLEX)
    return needed


def required_params(tool: BlastTool) -> list[BlastParam]:
    return [*COMMON_PARAMS, *tool_params(tool)]


def missing_params(params: ParamValues, tool: BlastTool) -> list[str]:
    """List the params a tool needs that are absent from ``params``."""
    return [name.value for name in required_params(tool) if name not in params]


def build_tool_config(tool: BlastTool, params: ParamValues) -> JSONObject:
    """Build the tool-specific ``blastConfig`` members.

    Keys are the wire names; members the tool does not use are left out
    rather than sent as null.

    :param tool: Selected tool.
    :param params: Raw param values.
    :returns: Tool-specific config members.
    """
    layout = TOOL_LAYOUTS[tool]
    config: JSONObject = {}

    if layout.task:
        config["task"] = tool.value
    if layout.gap_costs:
        gap_open, gap_extend = get_int_pair_value(params, BlastParam.GAP_COSTS)
        config["gapOpen"] = gap_open
        config["gapExtend"] = gap_extend
    if layout.match_mismatch:
        reward, penalty = get_int_pair_value(params, BlastParam.MATCH_MISMATCH_SCORE)
        config["reward"] = reward
        config["penalty"] = penalty
    if layout.word_size:
        config["wordSize"] = get_int_value(params, BlastParam.WORD_SIZE)
    if layout.matrix:
        config["matrix"] = get_normalized_value(params, BlastParam.SCORING_MATRIX)
    if layout.comp_based_stats:
        config["compBasedStats"] = get_normalized_value(
            params, BlastParam.COMP_ADJUST
        )
    config[layout.mask_key] = parse_low_complexity_filter(params)
    return config
