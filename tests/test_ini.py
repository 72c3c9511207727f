import pytest

from enginecore.ini import IniData, IniRegion, load_ini


class DictRegion(IniRegion):
    def __init__(self, **values):
        self.values = dict(values)
        self.seen = []

    def parse(self, name, value):
        self.seen.append((name, value))
        self.values[name] = value

    def get_str_data(self):
        return "".join(f"{k}={v}\n" for k, v in self.values.items())


def test_get_region_missing_returns_none():
    data = IniData()
    assert data.get_region("nothing") is None


def test_add_region_keeps_first():
    data = IniData()
    first = DictRegion()
    data.add_region("a", first)
    data.add_region("a", DictRegion())
    assert data.get_region("a") is first


def test_write_sorted_sections(tmp_path):
    data = IniData()
    data.add_region("b", DictRegion(x="2"))
    data.add_region("a", DictRegion(k="v"))
    target = tmp_path / "s.ini"
    load_ini(target, data, True)
    assert target.read_text() == "[a]\nk=v\n[b]\nx=2\n"


def test_round_trip(tmp_path):
    target = tmp_path / "s.ini"
    out = IniData()
    out.add_region("window", DictRegion(width="800", height="600"))
    load_ini(target, out, True)

    back = IniData()
    region = DictRegion()
    back.add_region("window", region)
    load_ini(target, back, False)
    assert region.values == {"width": "800", "height": "600"}


def test_comments_and_unknown_regions(tmp_path):
    target = tmp_path / "s.ini"
    target.write_text(
        "# full comment\n[known]#tail\na=1#note\n[other]\nb=2\n[known]\nc=x=y\n"
    )
    data = IniData()
    region = DictRegion()
    data.add_region("known", region)
    load_ini(target, data, False)
    assert region.seen == [("a", "1"), ("c", "x=y")]


def test_line_without_equals_gives_whole_line(tmp_path):
    target = tmp_path / "s.ini"
    target.write_text("[r]\nflag\n")
    data = IniData()
    region = DictRegion()
    data.add_region("r", region)
    load_ini(target, data, False)
    assert region.seen == [("flag", "flag")]


def test_missing_file_is_created_with_defaults(tmp_path):
    target = tmp_path / "new.ini"
    data = IniData()
    region = DictRegion(mode="on")
    data.add_region("cfg", region)
    load_ini(target, data, False)
    assert target.read_text() == "[cfg]\nmode=on\n"
    assert region.seen == []


def test_unwritable_path_raises(tmp_path):
    data = IniData()
    data.add_region("r", DictRegion(a="1"))
    with pytest.raises(OSError):
        load_ini(tmp_path, data, True)


def test_region_is_abstract():
    with pytest.raises(TypeError):
        IniRegion()