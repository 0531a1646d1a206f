"""Tests for SamplerContext lifecycle and generation."""

from __future__ import annotations

import pytest
from conftest import FixedBytesSource

from secure_random.bounded import INT32_MAX, INT32_MIN
from secure_random.config import SecureRandomConfig
from secure_random.context import ContextState, SamplerContext
from secure_random.entropy.mock import MockUniformSource
from secure_random.exceptions import (
    ConfigValidationError,
    EntropySourceUnavailableError,
    InvalidArgumentError,
    UseAfterReleaseError,
)
from secure_random.sampler import SecureRandom


@pytest.fixture
def context(mock_entropy_source: MockUniformSource) -> SamplerContext:
    """Return an open context owning a seeded mock source."""
    return SamplerContext(source=mock_entropy_source)


class TestGenerateBytes:
    @pytest.mark.parametrize("size", [1, 10, 250])
    def test_returns_exact_size(self, size: int) -> None:
        with SamplerContext() as ctx:
            assert len(ctx.generate_bytes(size)) == size

    @pytest.mark.parametrize("size", [0, -1, INT32_MIN])
    def test_size_less_than_one(self, size: int, context: SamplerContext) -> None:
        with pytest.raises(InvalidArgumentError) as exc:
            context.generate_bytes(size)
        assert exc.value.parameter == "size"

    def test_reuses_one_source(
        self, context: SamplerContext, mock_entropy_source: MockUniformSource
    ) -> None:
        for _ in range(5):
            context.generate_bytes(4)
        assert mock_entropy_source.call_count == 5
        assert mock_entropy_source.close_count == 0

    def test_source_failure_propagates(self) -> None:
        source = MockUniformSource(seed=1)
        context = SamplerContext(source=source)
        source.close()
        with pytest.raises(EntropySourceUnavailableError):
            context.generate_bytes(4)


class TestGenerateRange:
    @pytest.mark.parametrize(
        ("min_value", "max_value"),
        [
            (0, 1),
            (-5, 5),
            (INT32_MIN, INT32_MAX),
            (INT32_MIN, INT32_MIN + 1),
            (INT32_MIN, 0),
            (INT32_MAX - 1, INT32_MAX),
            (0, INT32_MAX),
        ],
    )
    def test_within_bounds(self, min_value: int, max_value: int) -> None:
        with SamplerContext() as ctx:
            for _ in range(20):
                assert min_value <= ctx.generate_range(min_value, max_value) <= max_value

    @pytest.mark.parametrize(("min_value", "max_value"), [(1, 1), (2, 1), (-1, -2)])
    def test_max_not_above_min(
        self, min_value: int, max_value: int, context: SamplerContext
    ) -> None:
        with pytest.raises(InvalidArgumentError) as exc:
            context.generate_range(min_value, max_value)
        assert exc.value.parameter == "max"

    def test_decodes_from_owned_source(self) -> None:
        source = FixedBytesSource(b"\x02\x00\x00\x00")
        with SamplerContext(source=source) as ctx:
            assert ctx.generate_range(0, 9) == 2
            assert ctx.generate_range(-10, -1) == -8
        assert source.requests == [4, 4]


class TestRelease:
    def test_initial_state_is_open(self, context: SamplerContext) -> None:
        assert context.state is ContextState.OPEN
        assert context.is_released is False

    def test_release_closes_source(
        self, context: SamplerContext, mock_entropy_source: MockUniformSource
    ) -> None:
        context.release()
        assert context.state is ContextState.RELEASED
        assert context.is_released is True
        assert mock_entropy_source.close_count == 1

    def test_double_release_is_noop(
        self, context: SamplerContext, mock_entropy_source: MockUniformSource
    ) -> None:
        context.release()
        context.release()
        assert mock_entropy_source.close_count == 1

    def test_generate_bytes_after_release(self, context: SamplerContext) -> None:
        context.release()
        with pytest.raises(UseAfterReleaseError) as exc:
            context.generate_bytes(8)
        assert exc.value.type_name == "secure_random.context.SamplerContext"

    def test_generate_range_after_release(self, context: SamplerContext) -> None:
        context.release()
        with pytest.raises(UseAfterReleaseError, match="SamplerContext"):
            context.generate_range(0, 10)

    def test_every_call_after_release_fails(self, context: SamplerContext) -> None:
        context.release()
        for _ in range(3):
            with pytest.raises(UseAfterReleaseError):
                context.generate_bytes(1)
            with pytest.raises(UseAfterReleaseError):
                context.generate_range(0, 1)

    def test_release_check_precedes_argument_validation(self, context: SamplerContext) -> None:
        context.release()
        with pytest.raises(UseAfterReleaseError):
            context.generate_bytes(0)
        with pytest.raises(UseAfterReleaseError):
            context.generate_range(5, 5)

    def test_with_block_releases(self, mock_entropy_source: MockUniformSource) -> None:
        with SamplerContext(source=mock_entropy_source) as ctx:
            ctx.generate_bytes(2)
        assert ctx.is_released
        assert mock_entropy_source.close_count == 1

    def test_with_block_releases_on_exception(self, mock_entropy_source: MockUniformSource) -> None:
        with pytest.raises(InvalidArgumentError):
            with SamplerContext(source=mock_entropy_source) as ctx:
                ctx.generate_bytes(0)
        assert ctx.is_released
        assert mock_entropy_source.close_count == 1

    def test_release_after_with_block(self, mock_entropy_source: MockUniformSource) -> None:
        with SamplerContext(source=mock_entropy_source) as ctx:
            pass
        ctx.release()
        assert mock_entropy_source.close_count == 1

    def test_released_even_if_source_close_raises(self) -> None:
        class _BrokenClose(FixedBytesSource):
            def close(self) -> None:
                super().close()
                raise RuntimeError("close failed")

        source = _BrokenClose(b"\x00")
        context = SamplerContext(source=source)
        with pytest.raises(RuntimeError, match="close failed"):
            context.release()
        assert context.is_released
        context.release()
        assert source.close_count == 1


class TestConstruction:
    def test_acquires_configured_source(self, default_config: SecureRandomConfig) -> None:
        with SamplerContext(default_config) as ctx:
            assert ctx.source_name == "system"

    def test_unknown_configured_source(self) -> None:
        config = SecureRandomConfig(
            _env_file=None,
            entropy_source_type="does_not_exist",  # type: ignore[call-arg]
        )
        with pytest.raises(EntropySourceUnavailableError):
            SamplerContext(config)

    def test_invalid_environment_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SECURE_RANDOM_ENTROPY_SOURCE_TYPE", "")
        with pytest.raises(ConfigValidationError, match="entropy_source_type"):
            SamplerContext()

    def test_is_secure_random(self, context: SamplerContext) -> None:
        assert isinstance(context, SecureRandom)

    def test_repr_reports_state(self, context: SamplerContext) -> None:
        assert "state='open'" in repr(context)
        context.release()
        assert "state='released'" in repr(context)


class TestDiagnostics:
    def test_records_mark_source_reused(self, diagnostic_config: SecureRandomConfig) -> None:
        with SamplerContext(diagnostic_config, source=MockUniformSource(seed=5)) as ctx:
            ctx.generate_bytes(3)
            ctx.generate_range(0, 9)
            records = ctx.sampling_logger.get_diagnostic_data()
        assert [r.operation for r in records] == ["generate_bytes", "generate_range"]
        assert all(r.sampler == "context" and r.source_reused for r in records)
        assert all(r.entropy_source_used == "mock_uniform" for r in records)
