import pytest

from algokit.weapons import (
    Bow,
    Sword,
    UnknownWeaponError,
    Weapon,
    create_weapon,
    main,
)


def test_create_sword():
    weapon = create_weapon("sword")
    assert isinstance(weapon, Sword)
    assert weapon.use() == "Using Sword: Swish! Slash! Deal close combat damage."


def test_create_bow():
    weapon = create_weapon("bow")
    assert isinstance(weapon, Bow)
    assert weapon.use() == "Using Bow: Twang! Thwack! Deal long-range damage."


def test_each_call_builds_a_new_weapon():
    first = create_weapon("sword")
    second = create_weapon("sword")
    assert first is not second
    assert first.use() == second.use()


def test_unknown_weapon_raises():
    with pytest.raises(UnknownWeaponError) as info:
        create_weapon("axe")
    assert info.value.kind == "axe"
    assert str(info.value) == "Error: Unknown weapon type 'axe'."


def test_unknown_weapon_error_is_value_error():
    with pytest.raises(ValueError):
        create_weapon("Sword")


def test_weapon_is_abstract():
    with pytest.raises(TypeError):
        Weapon()


def test_main_default_run(capsys):
    assert main() == 0
    captured = capsys.readouterr()
    assert "WeaponFactory is creating a Sword..." in captured.out
    assert "WeaponFactory is creating a Bow..." in captured.out
    assert "Using Sword: Swish! Slash! Deal close combat damage." in captured.out
    assert "Using Bow: Twang! Thwack! Deal long-range damage." in captured.out
    assert "------------------" in captured.out
    assert "Error: Unknown weapon type 'axe'." in captured.err


def test_main_with_arguments(capsys):
    assert main(["bow"]) == 0
    captured = capsys.readouterr()
    assert "Bow" in captured.out
    assert "Sword" not in captured.out
    assert captured.err == ""