from novadesk.swarm import (
    MAX_NAME_LENGTH,
    MAX_SWARM_DESKTOPS,
    MAX_SWARM_USERS,
    SwarmSession,
    SwarmState,
)


def test_new_session_is_idle():
    session = SwarmSession(42)
    assert session.state is SwarmState.IDLE
    assert session.users == []
    assert session.desktop_ids == []
    assert session.ai_federated is False


def test_state_progression():
    session = SwarmSession(42)
    session.add_user(101, "Alice", True)
    assert session.state is SwarmState.ACTIVE
    session.merge_desktop(1)
    assert session.state is SwarmState.MERGED
    session.federate_ai()
    assert session.state is SwarmState.FEDERATED
    assert session.ai_federated is True


def test_user_capacity_and_name_truncation():
    session = SwarmSession(1)
    for index in range(MAX_SWARM_USERS + 3):
        session.add_user(index, "n" * 50, False)
    assert len(session.users) == MAX_SWARM_USERS
    assert all(len(u.name) == MAX_NAME_LENGTH for u in session.users)


def test_desktop_capacity():
    session = SwarmSession(1)
    for desktop in range(MAX_SWARM_DESKTOPS + 2):
        session.merge_desktop(desktop)
    assert session.desktop_ids == list(range(MAX_SWARM_DESKTOPS))


def test_render_lists_users_and_desktops():
    session = SwarmSession(42)
    session.add_user(101, "Alice", True)
    session.add_user(102, "Bob", False)
    session.merge_desktop(1)
    session.merge_desktop(2)
    lines = session.render().splitlines()
    assert lines[0] == "[Swarm] Session 42 | Users: 2 | Desktops: 2 | AI: local | State: merged"
    assert lines[1:] == [
        "  User 101: Alice (AI=1)",
        "  User 102: Bob (AI=0)",
        "  Desktop 1",
        "  Desktop 2",
    ]


def test_render_after_federation():
    session = SwarmSession(7)
    session.federate_ai()
    assert session.render().endswith("AI: federated | State: federated")