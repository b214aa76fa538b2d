import color_describer


def test_smoke():
    palette = color_describer.load_palette()
    assert isinstance(palette, tuple) and len(palette) > 0
    assert color_describer.describe_color(palette, "D3C2A5") == "Slightly Dark Orangish White"
    for entry in palette:
        assert 0 <= entry.red <= 255 and 0 <= entry.green <= 255 and 0 <= entry.blue <= 255
        assert entry.description
