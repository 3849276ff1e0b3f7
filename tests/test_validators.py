import pytest
from solders.pubkey import Pubkey

from helius_mcp.tools.envelope import ErrorKind, ToolResult
from helius_mcp.tools.validators import is_valid_public_key, validate_public_key, validate_public_keys

VALID_KEYS = [
    "GsbwXfJraMomNxBcjK7xK2xQx5MQgQx8Kb71Wkgwq1Bi",
    "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA",
    "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
    "11111111111111111111111111111111",
]


@pytest.mark.parametrize("value", VALID_KEYS)
def test_valid_public_keys_parse(value):
    parsed = validate_public_key(value)
    assert isinstance(parsed, Pubkey)
    assert str(parsed) == value
    assert is_valid_public_key(value)


@pytest.mark.parametrize(
    "value",
    [
        "invalid-public-key",
        "",
        "0OIl0OIl0OIl0OIl0OIl0OIl0OIl0OIl",  # characters outside Base58
        "GsbwXfJraMomNxBcjK7xK2xQx5MQgQx8Kb71Wkgwq1Bi1111",  # decodes to the wrong length
        None,
        123,
    ],
)
def test_invalid_public_keys_return_validation_failure(value):
    result = validate_public_key(value)
    assert isinstance(result, ToolResult)
    assert result.is_error
    assert result.kind is ErrorKind.VALIDATION
    assert result.text == f"Invalid public key: {value}"
    assert not is_valid_public_key(value)


def test_validate_public_keys_all_valid():
    parsed = validate_public_keys(VALID_KEYS[:2])
    assert [str(key) for key in parsed] == VALID_KEYS[:2]


def test_validate_public_keys_first_invalid_wins():
    result = validate_public_keys([VALID_KEYS[0], "bad-one", "bad-two"])
    assert isinstance(result, ToolResult)
    assert result.text == "Invalid public key: bad-one"


def test_validate_public_keys_rejects_non_list():
    result = validate_public_keys(VALID_KEYS[0])
    assert isinstance(result, ToolResult)
    assert result.kind is ErrorKind.VALIDATION
    assert result.text.startswith("Invalid public key list")


def test_validate_public_keys_empty_list():
    assert validate_public_keys([]) == []
