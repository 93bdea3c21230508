"""
Protocol definitions and configuration.

The RenderSurface contract the core draws through, the application config,
and the Qt widget ABCs/adapters used by the Qt host. Qt-backed names are
loaded on first access so the core can import this package without Qt.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

from .form_config import FormBuilderConfig, set_form_config, get_form_config
from .render_surface import RenderSurface

if TYPE_CHECKING:
    from .widget_protocols import ValueGettable, ValueSettable, RangeConfigurable, ChangeSignalEmitter
    from .widget_adapters import (
        LineEditAdapter,
        PlainTextEditAdapter,
        SpinBoxAdapter,
        CheckBoxAdapter,
        PyQtWidgetMeta,
    )

_EXPORTS = {
    "ValueGettable": ("pyqt_formbuilder.protocols.widget_protocols", "ValueGettable"),
    "ValueSettable": ("pyqt_formbuilder.protocols.widget_protocols", "ValueSettable"),
    "RangeConfigurable": ("pyqt_formbuilder.protocols.widget_protocols", "RangeConfigurable"),
    "ChangeSignalEmitter": ("pyqt_formbuilder.protocols.widget_protocols", "ChangeSignalEmitter"),
    "LineEditAdapter": ("pyqt_formbuilder.protocols.widget_adapters", "LineEditAdapter"),
    "PlainTextEditAdapter": ("pyqt_formbuilder.protocols.widget_adapters", "PlainTextEditAdapter"),
    "SpinBoxAdapter": ("pyqt_formbuilder.protocols.widget_adapters", "SpinBoxAdapter"),
    "CheckBoxAdapter": ("pyqt_formbuilder.protocols.widget_adapters", "CheckBoxAdapter"),
    "PyQtWidgetMeta": ("pyqt_formbuilder.protocols.widget_adapters", "PyQtWidgetMeta"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "FormBuilderConfig",
    "set_form_config",
    "get_form_config",
    "RenderSurface",
    *_EXPORTS.keys(),
]
