"""Tests for fluid and constrained layout sizing."""

from unittest.mock import MagicMock

import pytest

from rastersize.config import SizingConfig
from rastersize.core.fluid import fluid_image_sizes
from rastersize.domain import FitPolicy, ImageDimensions, SizeConstraints


@pytest.fixture
def reporter() -> MagicMock:
    """Create a mock warning sink."""
    return MagicMock()


@pytest.fixture
def wide() -> ImageDimensions:
    """A 1600x800 source image."""
    return ImageDimensions(1600, 800)


class TestFluidImageSizes:
    """Tests for fluid_image_sizes."""

    def test_defaults(self, wide: ImageDimensions, reporter: MagicMock) -> None:
        """Test the default maximum of 800 with default densities."""
        result = fluid_image_sizes(wide, SizeConstraints(), reporter=reporter)
        assert result.sizes == (200, 400, 800, 1600)
        assert result.presentation_width == 800
        assert result.presentation_height == 400
        assert result.aspect_ratio == 2.0
        reporter.warn.assert_not_called()

    def test_default_capped_by_source(self, reporter: MagicMock) -> None:
        """Test the default maximum never exceeds the source width."""
        result = fluid_image_sizes(
            ImageDimensions(600, 300), SizeConstraints(), reporter=reporter
        )
        assert result.presentation_width == 600
        assert result.sizes == (150, 300, 600)

    def test_configured_default_width(
        self, wide: ImageDimensions, reporter: MagicMock
    ) -> None:
        """Test the default maximum comes from configuration."""
        result = fluid_image_sizes(
            wide,
            SizeConstraints(),
            reporter=reporter,
            config=SizingConfig(default_fluid_width=400),
        )
        assert result.sizes == (100, 200, 400, 800)

    def test_max_width_clamped(self, reporter: MagicMock) -> None:
        """Test a maximum larger than the source is clamped."""
        result = fluid_image_sizes(
            ImageDimensions(300, 300), SizeConstraints(max_width=1000), reporter=reporter
        )
        assert result.sizes == (75, 150, 300)
        assert result.presentation_width == 300
        assert result.presentation_height == 300

    def test_max_height_only(self, wide: ImageDimensions, reporter: MagicMock) -> None:
        """Test the maximum width derives from max_height."""
        result = fluid_image_sizes(wide, SizeConstraints(max_height=300), reporter=reporter)
        assert result.presentation_width == 600
        assert result.presentation_height == 300
        assert result.sizes == (150, 300, 600, 1200)

    def test_max_height_clamped(self, wide: ImageDimensions, reporter: MagicMock) -> None:
        """Test a max_height above the source height is clamped first."""
        result = fluid_image_sizes(wide, SizeConstraints(max_height=5000), reporter=reporter)
        assert result.presentation_width == 1600
        assert result.sizes == (400, 800, 1600)

    def test_both_maxima_resolved_with_fit(
        self, wide: ImageDimensions, reporter: MagicMock
    ) -> None:
        """Test max_width and max_height go through the fit resolver."""
        result = fluid_image_sizes(
            wide,
            SizeConstraints(max_width=500, max_height=500, fit=FitPolicy.INSIDE),
            reporter=reporter,
        )
        assert result.presentation_width == 500
        assert result.presentation_height == 250
        assert result.sizes == (125, 250, 500, 1000)

    def test_resolved_maxima_clamped(self, reporter: MagicMock) -> None:
        """Test a resolved box larger than the source is clamped."""
        result = fluid_image_sizes(
            ImageDimensions(300, 300),
            SizeConstraints(max_width=1000, max_height=1000),
            reporter=reporter,
        )
        assert result.sizes == (75, 150, 300)

    def test_breakpoints(self, wide: ImageDimensions, reporter: MagicMock) -> None:
        """Test explicit breakpoints replace density scaling."""
        result = fluid_image_sizes(
            wide,
            SizeConstraints(max_width=1000),
            srcset_breakpoints=[300, 700, 2000],
            reporter=reporter,
        )
        assert result.sizes == (300, 700, 1000)
        assert result.presentation_width == 1000

    def test_empty_breakpoints(self, wide: ImageDimensions, reporter: MagicMock) -> None:
        """Test an empty breakpoint list still yields the maximum width."""
        result = fluid_image_sizes(
            wide, SizeConstraints(), srcset_breakpoints=[], reporter=reporter
        )
        assert result.sizes == (800,)

    def test_breakpoints_deduplicated(
        self, wide: ImageDimensions, reporter: MagicMock
    ) -> None:
        """Test duplicate breakpoints collapse."""
        result = fluid_image_sizes(
            wide,
            SizeConstraints(max_width=800),
            srcset_breakpoints=[800, 400, 400],
            reporter=reporter,
        )
        assert result.sizes == (400, 800)

    def test_custom_densities(self, wide: ImageDimensions, reporter: MagicMock) -> None:
        """Test densities scale the maximum width."""
        result = fluid_image_sizes(
            wide,
            SizeConstraints(max_width=600),
            output_pixel_densities=[1.5, 3],
            reporter=reporter,
        )
        assert result.sizes == (600, 900)

    def test_warns_about_fixed_dimensions(
        self, wide: ImageDimensions, reporter: MagicMock
    ) -> None:
        """Test width/height are reported as ignored."""
        result = fluid_image_sizes(
            wide,
            SizeConstraints(width=300, height=200),
            reporter=reporter,
            source="hero.webp",
        )
        assert result.presentation_width == 800
        message = reporter.warn.call_args[0][0]
        assert "width: 300" in message
        assert "height: 200" in message
        assert "hero.webp" in message
        assert "fluid and constrained image layouts" in message

    def test_tiny_maximum_drops_zero_widths(self, reporter: MagicMock) -> None:
        """Test rounding never produces non-positive widths."""
        result = fluid_image_sizes(
            ImageDimensions(10, 10), SizeConstraints(max_width=1), reporter=reporter
        )
        assert result.sizes == (1, 2)

    @pytest.mark.parametrize(
        ("dimensions", "constraints"),
        [
            (ImageDimensions(1600, 800), SizeConstraints()),
            (ImageDimensions(333, 777), SizeConstraints(max_height=401)),
            (ImageDimensions(4000, 3000), SizeConstraints(max_width=1234)),
            (ImageDimensions(50, 50), SizeConstraints(max_width=49, max_height=7, fit="outside")),
        ],
    )
    def test_invariants(
        self,
        dimensions: ImageDimensions,
        constraints: SizeConstraints,
        reporter: MagicMock,
    ) -> None:
        """Test presentation width is included and no size exceeds the source."""
        result = fluid_image_sizes(dimensions, constraints, reporter=reporter)
        assert result.presentation_width in result.sizes
        assert list(result.sizes) == sorted(set(result.sizes))
        assert all(0 < size <= dimensions.width for size in result.sizes)

    def test_idempotent(self, wide: ImageDimensions, reporter: MagicMock) -> None:
        """Test identical inputs give identical results."""
        constraints = SizeConstraints(max_width=720, max_height=500, fit=FitPolicy.FILL)
        first = fluid_image_sizes(wide, constraints, reporter=reporter)
        second = fluid_image_sizes(wide, constraints, reporter=reporter)
        assert first == second
