"""Shared fixtures for the recovery tests."""
from __future__ import annotations

import json

import pytest

from share_recovery import Share


def _shares_from_points(points):
    return [Share(identifier=str(x), x=x, y=y) for x, y in points]


@pytest.fixture
def make_shares():
    return _shares_from_points


@pytest.fixture
def corrupted_shares():
    # f(x) = x^2 + 1 sampled at 1..5, share 3 corrupted from 10 to 11
    return _shares_from_points([(1, 2), (2, 5), (3, 11), (4, 17), (5, 26)])


@pytest.fixture
def write_document(tmp_path):
    def _write(data, name="input.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
