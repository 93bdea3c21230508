"""Tests for protocol ABCs, adapters and configuration."""

import pytest

from pyqt_formbuilder.protocols import FormBuilderConfig, RenderSurface, get_form_config, set_form_config


def test_form_config_defaults_and_override():
    assert get_form_config().storage_key == "data"
    try:
        set_form_config(FormBuilderConfig(default_form_title="Quiz", default_question_name="Q"))
        from pyqt_formbuilder.core import Form

        form = Form()
        form.add_question()
        assert form.title == "Quiz"
        assert form.questions[0].name == "Q"
    finally:
        set_form_config(FormBuilderConfig())


def test_render_surface_is_abstract():
    with pytest.raises(TypeError):
        RenderSurface()


def test_line_edit_adapter(qapp):
    from pyqt_formbuilder.protocols import LineEditAdapter, ValueGettable, ValueSettable

    widget = LineEditAdapter()
    assert isinstance(widget, ValueGettable) and isinstance(widget, ValueSettable)
    edits = []
    widget.connect_change_signal(edits.append)
    widget.set_value("  kept verbatim ")
    assert widget.get_value() == "  kept verbatim "
    assert edits == []
    widget.set_value(None)
    assert widget.get_value() == ""


def test_plain_text_adapter_set_value_is_silent(qapp):
    from pyqt_formbuilder.protocols import PlainTextEditAdapter

    widget = PlainTextEditAdapter()
    edits = []
    widget.connect_change_signal(edits.append)
    widget.set_value("first")
    assert edits == []
    widget.setPlainText("typed")
    assert edits[-1] == "typed"


def test_spinbox_adapter(qapp):
    from pyqt_formbuilder.protocols import RangeConfigurable, SpinBoxAdapter

    widget = SpinBoxAdapter()
    assert isinstance(widget, RangeConfigurable)
    edits = []
    widget.connect_change_signal(edits.append)
    widget.configure_range(0, 59)
    widget.set_value(30)
    assert widget.get_value() == 30
    assert edits == []
    widget.setValue(31)
    assert edits == [31]


def test_checkbox_adapter(qapp):
    from pyqt_formbuilder.protocols import CheckBoxAdapter

    widget = CheckBoxAdapter("Agree")
    edits = []
    widget.connect_change_signal(edits.append)
    widget.set_value(True)
    assert widget.get_value() is True
    assert edits == []
    widget.click()
    assert edits == [False]
