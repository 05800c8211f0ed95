from fractalppm.menu import MenuData


def _noop(action_data):
    return None


def _other(action_data):
    return None


def test_registered_action_is_found():
    menu = MenuData()
    menu.add_action("quit", _noop, "Quit.")
    assert menu.get_function("quit") is _noop
    assert menu.get_description("quit") == "Quit."


def test_unknown_action():
    menu = MenuData()
    assert menu.get_function("menu") is None
    assert menu.get_description("menu") == ""


def test_names_keep_insertion_order():
    menu = MenuData()
    menu.add_action("write", _noop, "Write output image to file.")
    menu.add_action("copy", _noop, "Copy input image 1 to output image.")
    assert menu.names == ("write", "copy")


def test_sorted_descriptions_sorted_by_name():
    menu = MenuData()
    menu.add_action("write", _noop, "w")
    menu.add_action("+", _noop, "plus")
    menu.add_action("copy", _noop, "c")
    assert menu.sorted_descriptions() == [("+", "plus"), ("copy", "c"), ("write", "w")]


def test_duplicate_name_replaces_function():
    menu = MenuData()
    menu.add_action("grid", _noop, "first")
    menu.add_action("grid", _other, "second")
    assert menu.names == ("grid", "grid")
    assert menu.get_function("grid") is _other
    assert menu.get_description("grid") == "second"