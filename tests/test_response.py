# tests/test_response.py

from core.response import ErrorCode, Response


def test_succeed_defaults():
    response = Response.succeed(data={"store": "x"})

    assert response.success
    assert response.status_code == 200
    assert response.error is None
    assert response.data == {"store": "x"}
    assert str(response) == "Success: "


def test_fail_with_field_errors():
    response = Response.fail(
        detail="Please correct the following fields: Email.",
        error=ErrorCode.VALIDATION_FAILED,
        data={"errors": {"email": "Email is invalid"}},
    )

    assert not response.success
    assert response.status_code == 400
    assert response.field_errors == {"email": "Email is invalid"}
    assert str(response) == "Error: VALIDATION_FAILED"


def test_field_errors_default_empty():
    assert Response.fail(error="CUSTOM").field_errors == {}
    assert str(Response.fail(error="CUSTOM")) == "Error: CUSTOM"
