from stampmint.schema import ValidationCode, ValidationResult


def test_codes() -> None:
    assert [code.value for code in ValidationCode] == [
        "success",
        "timestamp.invalid",
        "timestamp.delayed",
        "key.invalid",
    ]


def test_passed() -> None:
    result = ValidationResult.passed()

    assert result
    assert result.code is ValidationCode.SUCCESS
    assert result.message == "success"
    assert result.data is None


def test_failed() -> None:
    result = ValidationResult.failed(ValidationCode.TIMESTAMP_DELAYED, {"delay": -10})

    assert not result
    assert result.message == "fail:timestamp.delayed"
    assert result.data == {"delay": -10}
    assert result.code == "timestamp.delayed"
