from solz.asset_tracking import ResourceHandles


def test_empty_is_all_done():
    handles = ResourceHandles()
    assert handles.is_all_done() is True
    assert handles.update(lambda h: True) == []


def test_not_done_until_loaded():
    handles = ResourceHandles()
    inserted = []
    handles.load_resource("level", inserted.append)
    assert handles.is_all_done() is False
    assert handles.update(lambda h: False) == []
    assert inserted == []
    assert handles.waiting == ("level",)


def test_loaded_resource_is_inserted_once():
    handles = ResourceHandles()
    inserted = []
    handles.load_resource("player", inserted.append)
    assert handles.update(lambda h: True) == ["player"]
    assert handles.update(lambda h: True) == []
    assert inserted == ["player"]
    assert handles.finished == ("player",)
    assert handles.is_all_done()


def test_partial_loading_keeps_queue_order():
    handles = ResourceHandles()
    inserted = []
    for name in ["a", "b", "c"]:
        handles.load_resource(name, inserted.append)
    loaded = {"b"}
    assert handles.update(lambda h: h in loaded) == ["b"]
    assert handles.waiting == ("a", "c")
    loaded.update({"a", "c"})
    assert handles.update(lambda h: h in loaded) == ["a", "c"]
    assert inserted == ["b", "a", "c"]
    assert handles.is_all_done()


def test_each_handle_gets_its_own_callback():
    handles = ResourceHandles()
    seen = {}
    handles.load_resource("x", lambda h: seen.setdefault("first", h))
    handles.load_resource("y", lambda h: seen.setdefault("second", h))
    handles.update(lambda h: True)
    assert seen == {"first": "x", "second": "y"}