import pytest

from chnative.result import NotSupportedError, Result


def test_last_insert_id_not_supported():
    with pytest.raises(NotSupportedError, match="LastInsertId is not supported"):
        Result().last_insert_id()


def test_rows_affected_not_supported():
    with pytest.raises(NotSupportedError, match="RowsAffected is not supported"):
        Result().rows_affected()