import numpy as np
import pytest

from phaseportrait.colormap import (
    NIST_SIZE,
    STANDARD_SIZE,
    build_colormap,
    hsl_to_rgb,
    nist_indices,
)


def test_hsl_to_rgb_primaries():
    rgb = hsl_to_rgb(np.array([0.0, 120.0, 240.0, 360.0]), 1.0, 0.5)
    expected = np.array([
        [1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, 0.0, 1.0],
        [1.0, 0.0, 0.0],
    ])
    np.testing.assert_allclose(rgb, expected, atol=1e-12)


def test_hsl_to_rgb_grays():
    """Zero saturation or extreme lightness collapses to gray/black/white."""
    np.testing.assert_allclose(hsl_to_rgb(200.0, 0.0, 0.5), [0.5, 0.5, 0.5])
    np.testing.assert_allclose(hsl_to_rgb(200.0, 1.0, 0.0), [0.0, 0.0, 0.0])
    np.testing.assert_allclose(hsl_to_rgb(200.0, 1.0, 1.0), [1.0, 1.0, 1.0])


def test_standard_colormap():
    cm = build_colormap("standard")
    assert cm.shape == (STANDARD_SIZE, 3)
    assert np.all(cm >= 0.0) and np.all(cm <= 1.0)
    # hue 0 and hue 360 are the same color
    np.testing.assert_allclose(cm[0], cm[-1], atol=1e-12)
    np.testing.assert_allclose(cm[0], [1.0, 0.0, 0.0], atol=1e-12)


def test_nist_indices_partition():
    idx = nist_indices(NIST_SIZE)
    assert len(idx) == 600
    np.testing.assert_array_equal(idx[:150], np.arange(150))
    np.testing.assert_array_equal(idx[150:300], np.arange(150, 450, 2))
    np.testing.assert_array_equal(idx[300:450], np.arange(450, 600))
    np.testing.assert_array_equal(idx[450:], np.arange(600, 900, 2))


def test_nist_colormap():
    cm = build_colormap("nist")
    assert len(cm) < NIST_SIZE
    assert cm.shape == (600, 3)

    full = hsl_to_rgb(np.linspace(0.0, 360.0, NIST_SIZE), 1.0, 0.5)
    np.testing.assert_array_equal(cm, full[nist_indices(NIST_SIZE)])


def test_colormap_deterministic_and_cached():
    a = build_colormap("nist")
    b = build_colormap("nist")
    np.testing.assert_array_equal(a, b)
    assert build_colormap("reference") is a


def test_colormap_is_read_only():
    cm = build_colormap()
    assert not cm.flags.writeable
    with pytest.raises(ValueError):
        cm[0, 0] = 0.5


def test_custom_size():
    assert build_colormap("standard", ncolors=60).shape == (60, 3)
    # 10 + 10 + 10 + 10
    assert build_colormap("nist", ncolors=60).shape == (40, 3)


@pytest.mark.parametrize("ncolors", [0, -6, 100, 7])
def test_bad_size_rejected(ncolors):
    with pytest.raises(ValueError):
        build_colormap("standard", ncolors=ncolors)


def test_unknown_layout_rejected():
    with pytest.raises(ValueError, match="Unknown colormap type"):
        build_colormap("viridis")
