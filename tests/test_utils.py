import pytest
import torch

from affinevis.utils import (
    clamp,
    dehomogenise_coordinates,
    homogenise_coordinates,
    parse_field,
)


def test_homogenise_coordinates():
    coords = torch.tensor([[1.0, 2.0], [3.0, 4.0]])
    result = homogenise_coordinates(coords)
    assert result.shape == (2, 3)
    assert torch.equal(result[:, 2], torch.ones(2))
    assert torch.equal(dehomogenise_coordinates(result), coords)
    assert torch.equal(
        dehomogenise_coordinates(torch.tensor([2.0, 4.0, 6.0, 2.0])),
        torch.tensor([1.0, 2.0, 3.0]),
    )


def test_clamp():
    assert clamp(7.5, 5.0) == 5.0
    assert clamp(-7.5, 5.0) == -5.0
    assert clamp(1.25, 5.0) == 1.25


def test_parse_field():
    assert parse_field("") == 0.0
    assert parse_field("  ") == 0.0
    assert parse_field(" 2.5 ") == 2.5
    assert parse_field("-90") == -90.0
    for text in ["abc", "nan", "inf", "-inf"]:
        with pytest.raises(ValueError):
            parse_field(text)
