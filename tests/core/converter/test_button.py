import pytest

from psd2fgui.core.converter import create_button, find_state_layers, parse_node, resolve_button_pages


class TestResolveButtonPages:

    def test_up_and_down_only(self):
        assert resolve_button_pages([True, True, False, False]) == [0, 1, 0, 1]

    def test_all_states(self):
        assert resolve_button_pages([True, True, True, True]) == [0, 1, 2, 3]

    def test_up_only(self):
        assert resolve_button_pages([True, False, False, False]) == [0, 0, 0, 0]

    def test_over_falls_back_to_up_even_with_down(self):
        assert resolve_button_pages([True, True, False, True])[2] == 0

    def test_selected_over_without_down_uses_up(self):
        assert resolve_button_pages([True, False, True, False]) == [0, 0, 2, 0]


class TestFindStateLayers:

    def test_searches_whole_subtree(self, ctx, make_group, make_image):
        deep = make_image("shine@over")
        button = make_group("ButtonOk", [
            make_image("bg@up"),
            make_group("inner", [make_group("deeper", [deep])]),
        ])
        layers = find_state_layers(button, ctx)
        assert layers[0].name == "bg@up"
        assert layers[1] is None
        assert layers[2] is deep
        assert layers[3] is None


class TestCreateButton:

    def test_two_state_button(self, ctx, make_group, make_image, parse_xml):
        button = make_group("ButtonOk", [
            make_image("bg@up", seed=1), make_image("bg@down", seed=2),
        ], width=80, height=30)
        item, inst_props = create_button(button, ctx)

        assert item.type == "component"
        assert item.name == "ButtonOk.xml"
        assert inst_props == {}

        markup = parse_xml(item.data)
        assert markup.get("size") == "80,30"
        assert markup.get("extention") == "Button"
        assert [child.tag for child in markup] == ["controller", "displayList", "Button"]

        controller = markup.find("controller")
        assert controller.get("name") == "button"
        assert controller.get("pages") == "0,up,1,down,2,over,3,selectedOver"

        elements = list(markup.find("displayList"))
        assert [el.get("fileName") for el in elements] == ["bg_down.png", "bg_up.png"]
        gears = [el.find("gearDisplay") for el in elements]
        assert [g.get("controller") for g in gears] == ["button", "button"]
        assert [g.get("pages") for g in gears] == ["1,3", "0,2"]

        extension = markup.find("Button")
        assert extension.get("mode") is None
        assert extension.get("downEffect") is None
        assert extension.get("downEffectValue") is None

    def test_single_state_button_gets_scale_effect(self, ctx, make_group, make_image, parse_xml):
        button = make_group("ButtonFlat", [make_image("skin@up")])
        item, _ = create_button(button, ctx)
        markup = parse_xml(item.data)
        extension = markup.find("Button")
        assert extension.get("downEffect") == "scale"
        assert extension.get("downEffectValue") == "1.1"
        gear = markup.find("displayList")[0].find("gearDisplay")
        assert gear.get("pages") == "0,1,2,3"

    def test_non_state_layers_get_no_gear(self, ctx, make_group, make_image, parse_xml):
        button = make_group("ButtonOk", [
            make_image("shadow", seed=1), make_image("bg@up", seed=2), make_image("bg@down", seed=3),
        ])
        item, _ = create_button(button, ctx)
        elements = list(parse_xml(item.data).find("displayList"))
        assert elements[-1].get("fileName") == "shadow.png"
        assert elements[-1].find("gearDisplay") is None

    def test_check_button(self, ctx, make_group, make_image, parse_xml):
        button = make_group("CheckButtonMute", [make_image("box@up", seed=1), make_image("box@down", seed=2)])
        item, inst_props = create_button(button, ctx)
        assert parse_xml(item.data).find("Button").get("mode") == "Check"
        assert inst_props == {"checked": "true"}

    def test_radio_button(self, ctx, make_group, make_image, parse_xml):
        button = make_group("RadioButtonA", [make_image("dot@up", seed=1), make_image("dot@selectedOver", seed=2)])
        item, inst_props = create_button(button, ctx)
        markup = parse_xml(item.data)
        assert markup.find("Button").get("mode") == "Radio"
        assert "checked" not in inst_props
        gears = [el.find("gearDisplay").get("pages") for el in markup.find("displayList")]
        assert gears == ["3", "0,1,2"]

    def test_title_and_icon_are_lifted(self, ctx, make_group, make_image, make_text, parse_xml):
        button = make_group("ButtonOk", [
            make_image("bg@up", seed=1),
            make_image("pic@icon", seed=9),
            make_text("label@title", value="OK"),
        ])
        item, inst_props = create_button(button, ctx)
        assert inst_props == {"title": "OK", "icon": "ui://pkg12345ab0"}

        elements = list(parse_xml(item.data).find("displayList"))
        title, icon = elements[0], elements[1]
        assert title.tag == "text" and title.get("name") == "title"
        assert "text" not in title.attrib
        assert icon.tag == "loader" and icon.get("name") == "icon"
        assert "url" not in icon.attrib
        assert icon.get("fileName") == "pic_icon.png"

    def test_title_inside_nested_plain_group(self, ctx, make_group, make_image, make_text):
        button = make_group("ButtonOk", [
            make_image("bg@up"),
            make_group("labels", [make_text("caption@title", value="Play")]),
        ])
        _, inst_props = create_button(button, ctx)
        assert inst_props == {"title": "Play"}


class TestButtonReference:

    def test_reference_carries_instance_properties(self, ctx, make_group, make_image, make_text,
                                                   display_list):
        root = make_group("Main", left=0, top=0)
        button = make_group("CheckButtonSound", [
            make_image("bg@up", seed=1),
            make_text("label@title", value="Sound"),
        ], left=10, top=15, width=60, height=20)

        overrides = parse_node(button, root, display_list, ctx)
        assert overrides == {}

        element = display_list[0]
        assert element.tag == "component"
        assert element.get("xy") == "10,15"
        assert element.get("fileName") == "CheckButtonSound.xml"
        assert element.get("src") == ctx.package.components[-1].id

        inst = element.find("Button")
        assert inst is not None
        assert dict(inst.attrib) == {"title": "Sound", "checked": "true"}

    def test_plain_button_reference_has_empty_button_element(self, ctx, make_group, make_image,
                                                             display_list):
        parse_node(make_group("ButtonGo", [make_image("bg@up")]), make_group("Main"), display_list, ctx)
        inst = display_list[0].find("Button")
        assert inst is not None
        assert len(inst.attrib) == 0

    @pytest.mark.parametrize("name", ["ButtonA", "CheckButtonA", "RadioButtonA"])
    def test_all_button_kinds_register_a_component(self, ctx, make_group, make_image, display_list, name):
        parse_node(make_group(name, [make_image("bg@up")]), make_group("Main"), display_list, ctx)
        assert [c.name for c in ctx.package.components] == [f"{name}.xml"]
