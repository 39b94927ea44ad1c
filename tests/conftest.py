"""Shared fixtures for md-macros tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest
import structlog

from md_macros.config.settings import SelfReferenceBoundaryPolicy, Settings, get_settings
from md_macros.core.models import Boundary
from md_macros.parsing.boundaries import BoundarySet, DocumentBoundaries


@pytest.fixture(autouse=True)
def _reset_global_state():
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def strict_settings() -> Settings:
    return Settings(
        _env_file=None,
        self_reference_boundary_policy=SelfReferenceBoundaryPolicy.STRICT,
    )


@pytest.fixture
def no_boundaries() -> DocumentBoundaries:
    return DocumentBoundaries(code_blocks=BoundarySet(), quotes=BoundarySet())


@pytest.fixture
def make_boundaries() -> Callable[..., DocumentBoundaries]:
    """Build boundaries covering the first occurrence of each snippet."""

    def _make(
        source: str,
        *,
        code: tuple[str, ...] = (),
        quotes: tuple[str, ...] = (),
    ) -> DocumentBoundaries:
        def _span(snippet: str) -> Boundary:
            return Boundary(index=source.index(snippet), length=len(snippet))

        return DocumentBoundaries(
            code_blocks=BoundarySet(_span(s) for s in code),
            quotes=BoundarySet(_span(s) for s in quotes),
        )

    return _make
