import errno

import pytest

from pipeutils.codes import UvErrno
from pipeutils.errors import (
    err_name,
    get_uv_errmsg,
    get_uv_error,
    strerror,
    translate_posix_error,
)


@pytest.mark.parametrize("code", list(UvErrno))
def test_err_name_matches_member_name(code):
    assert err_name(code) == code.name
    assert err_name(int(code)) == code.name


@pytest.mark.parametrize("code", list(UvErrno))
def test_strerror_matches_member_message(code):
    assert strerror(int(code)) == code.message


def test_known_messages():
    assert strerror(UvErrno.EINVAL) == "invalid argument"
    assert strerror(UvErrno.EOF) == "end of file"
    assert err_name(UvErrno.EAI_BADHINTS) == "EAI_BADHINTS"


def test_unknown_code_name_and_message():
    assert err_name(12345) == "Unknown system error 12345"
    assert strerror(12345) == "Unknown system error 12345"


def test_translate_keeps_non_positive_values():
    assert translate_posix_error(0) == 0
    assert translate_posix_error(-7) == -7


def test_translate_negates_positive_errno():
    assert translate_posix_error(errno.ENOENT) == -errno.ENOENT
    assert translate_posix_error(errno.EINVAL) == -errno.EINVAL


@pytest.mark.parametrize("name", ["ENOBUFS", "EINPROGRESS", "EWOULDBLOCK", "EAGAIN"])
def test_translate_folds_retry_errors_into_eagain(name):
    assert translate_posix_error(getattr(errno, name)) == -errno.EAGAIN


def test_get_uv_error_from_oserror():
    exc = OSError(errno.ENOENT, "missing")
    assert get_uv_error(exc) == UvErrno.ENOENT


def test_get_uv_error_from_int():
    assert get_uv_error(errno.EACCES) == UvErrno.EACCES
    assert get_uv_error(errno.EWOULDBLOCK) == UvErrno.EAGAIN


def test_get_uv_error_without_errno():
    assert get_uv_error(OSError("no code")) == 0


def test_get_uv_errmsg():
    assert get_uv_errmsg(errno.ENOENT) == "no such file or directory"
    assert get_uv_errmsg(OSError(errno.EPIPE, "pipe")) == "broken pipe"