from cardduel.domain.combat_log import CombatLog


def test_combat_log_appends_in_order() -> None:
    log = CombatLog()
    log.push("first")
    log.extend(["second", "third"])

    assert log.entries() == ("first", "second", "third")
    assert len(log) == 3


def test_entries_snapshot_is_not_affected_by_later_pushes() -> None:
    log = CombatLog()
    log.push("first")
    snapshot = log.entries()
    log.push("second")

    assert snapshot == ("first",)
