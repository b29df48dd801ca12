"""Shared pytest configuration."""

import matplotlib
import pytest

from secprops import Section

matplotlib.use("Agg")


class FixedSection(Section):
    """Section that reports the values it was given."""

    def __init__(self, area, centroid=(0.0, 0.0), moments=(0.0, 0.0), product=0.0):
        self._area = area
        self._centroid = centroid
        self._moments = moments
        self._product = product

    def area(self):
        return self._area

    def centroid(self):
        return self._centroid

    def moment_of_inertia(self):
        return self._moments

    def product_of_inertia(self):
        return self._product


@pytest.fixture
def fixed():
    """Factory for sections with hand-picked values."""
    return FixedSection
