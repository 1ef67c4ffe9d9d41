import os
from collections.abc import Callable, Generator

import pytest

# Param values as the BLAST question form submits them for a blastn search.
BLASTN_PARAMS: dict[str, str] = {
    "MultiBlastDatabaseType": "Genome",
    "BlastAlgorithm": "'blastn'",
    "BlastDatabaseOrganism": "Plasmodium,Pfalciparum3D7,PvivaxP01",
    "BlastQuerySequence": ">seq1\nATGCGTACGTTAGC",
    "ExpectationValue": "'10'",
    "NumQueryResults": "'50'",
    "MaxMatchesQueryRange": "'0'",
    "WordSize": "'11'",
    "ScoringMatrix": "'BLOSUM62'",
    "MatchMismatchScore": "'2,-3'",
    "GapCosts": "'5,2'",
    "CompAdjust": "'2'",
    "FilterLowComplex": "'dust'",
    "SoftMask": "'false'",
    "LowerCaseMask": "'false'",
}


@pytest.fixture(scope="session", autouse=True)
def _test_env_defaults() -> None:
    os.environ.setdefault("LOG_FORMAT", "console")
    os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None]:
    from veupath_multiblast.platform.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def blast_params() -> Callable[..., dict[str, str]]:
    """Build form param values, overriding or dropping individual params.

    ``blast_params(BlastAlgorithm="'blastp'", GapCosts=None)`` returns the
    blastn defaults with the algorithm replaced and ``GapCosts`` removed.
    """

    def _factory(**overrides: str | None) -> dict[str, str]:
        params = dict(BLASTN_PARAMS)
        for name, value in overrides.items():
            if value is None:
                params.pop(name, None)
            else:
                params[name] = value
        return params

    return _factory
