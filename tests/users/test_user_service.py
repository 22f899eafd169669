import pytest

from church_attendance.core.enums import Role
from church_attendance.core.exceptions import AuthorizationError, NotFoundError, ValidationError


def test_member_updates_own_profile(world, member):
    updated = world.user_service.update_profile(
        member("u_teacher"),
        "u_teacher",
        {"name": "New Name", "phoneNumber": "010-1111-2222", "email": "hacked@x.org"},
    )

    assert updated.name == "New Name"
    assert updated.phone_number == "010-1111-2222"
    assert world.users_repo.get_by_id("u_teacher").email == "u_teacher@grace.org"


def test_teacher_cannot_edit_department_leader(world, member):
    with pytest.raises(AuthorizationError):
        world.user_service.update_profile(member("u_teacher"), "u_dept", {"name": "X"})


def test_department_leader_edits_teacher_but_not_role(world, member):
    dept = member("u_dept")

    assert world.user_service.update_profile(dept, "u_teacher", {"name": "Renamed"}).name == "Renamed"
    with pytest.raises(AuthorizationError):
        world.user_service.update_profile(dept, "u_teacher", {"role": "ADMIN"})
    assert world.users_repo.get_by_id("u_teacher").role == Role.TEACHER


def test_admin_promotes_pending_member(world, member):
    world.user_service.update_profile(member("u_admin"), "u_pending", {"role": "TEACHER", "departmentId": "d_2"})

    stored = world.users_repo.get_by_id("u_pending")
    assert stored.role == Role.TEACHER
    assert stored.department_id == "d_2"


def test_invalid_role_is_rejected(world, member):
    with pytest.raises(ValidationError):
        world.user_service.update_profile(member("u_admin"), "u_pending", {"role": "BISHOP"})


def test_members_of_other_churches_are_not_found(world, member):
    with pytest.raises(NotFoundError):
        world.user_service.update_profile(member("u_admin"), "u_other", {"name": "X"})


def test_department_leader_assigns_teacher_class(world, member):
    dept = member("u_dept")

    world.user_service.update_profile(dept, "u_teacher", {"classId": "k_2"})
    assert world.users_repo.get_by_id("u_teacher").class_id == "k_2"

    with pytest.raises(ValidationError):
        world.user_service.update_profile(dept, "u_teacher", {"classId": "k_3"})


def test_department_leader_cannot_unassign_teacher_of_another_department(world, member):
    with pytest.raises(AuthorizationError):
        world.user_service.update_profile(member("u_dept"), "u_teacher2", {"classId": ""})
    assert world.users_repo.get_by_id("u_teacher2").class_id == "k_3"


def test_department_leader_unassigns_own_teacher(world, member):
    world.user_service.update_profile(member("u_dept"), "u_teacher", {"classId": None})
    assert world.users_repo.get_by_id("u_teacher").class_id is None


@pytest.mark.parametrize(
    "changes",
    [{"name": 5}, {"phoneNumber": 1234}, {"profileImage": ["a"]}, {"departmentId": ["d_1"]}],
)
def test_non_text_values_are_rejected(world, member, changes):
    with pytest.raises(ValidationError):
        world.user_service.update_profile(member("u_admin"), "u_pending", changes)
