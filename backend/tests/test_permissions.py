import pytest

from bdseeker.core.errors import ForbiddenError, UnauthorizedError
from bdseeker.core.permissions import Identity, authorize
from bdseeker.models.user import Role
from bdseeker.schemas.common import PageParams, total_pages


def test_authorize_passes_allowed_role():
    ident = Identity(user_id=1, email="c@bdseeker.io", role=Role.COMPANY)
    assert authorize(ident, [Role.COMPANY, Role.ADMIN]) is ident


def test_authorize_without_identity_is_unauthorized():
    with pytest.raises(UnauthorizedError):
        authorize(None, [Role.ADMIN])


def test_authorize_wrong_role_is_forbidden():
    ident = Identity(user_id=1, email="d@bdseeker.io", role=Role.DEVELOPER)
    with pytest.raises(ForbiddenError):
        authorize(ident, [Role.ADMIN])


@pytest.mark.parametrize(
    "page,limit,expected",
    [
        (None, None, (1, 10)),
        (0, 0, (1, 10)),
        (-3, 101, (1, 10)),
        (2, 100, (2, 100)),
        (3, 25, (3, 25)),
    ],
)
def test_page_params_normalize(page, limit, expected):
    p = PageParams.normalize(page, limit)
    assert (p.page, p.limit) == expected


def test_offset_and_total_pages():
    assert PageParams.normalize(3, 20).offset == 40
    assert total_pages(0, 10) == 0
    assert total_pages(21, 10) == 3
