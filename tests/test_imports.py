def test_import_cardduel_package() -> None:
    import importlib

    module = importlib.import_module("cardduel")
    assert module.__version__


def test_import_services_no_side_effects() -> None:
    from cardduel.services import CombatController, create_combat

    assert callable(create_combat)
    assert CombatController.__name__ == "CombatController"
