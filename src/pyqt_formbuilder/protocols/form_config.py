"""Application configuration for the form builder.

Provides hooks for the host application to customize storage location,
logging, window defaults and naming of new forms and questions.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class FormBuilderConfig:
    """Configuration for the form builder.

    Applications can subclass this or pass a customized instance to
    set_form_config() before building any windows.

    Attributes:
        settings_organization: QSettings organization name for the state store
        settings_application: QSettings application name for the state store
        storage_key: Key the serialized application state is saved under
        seed_demo_form: Start with one question of each kind when nothing is saved
        default_form_title: Title given to new blank forms
        default_question_name: Name given to newly added questions
    """

    settings_organization: str = "pyqt-formbuilder"
    settings_application: str = "pyqt-formbuilder"
    storage_key: str = "data"
    seed_demo_form: bool = True
    default_form_title: str = "Untitled form"
    default_question_name: str = "Question"
    window_title: str = "Forms"
    window_width: int = 900
    window_height: int = 700
    log_dir: Optional[str] = None
    log_prefix: str = "pyqt_formbuilder_"
    log_level: str = "INFO"
    log_logger_name: str = "pyqt_formbuilder"


# Global config instance (set by application)
_form_config: Optional[FormBuilderConfig] = None


def set_form_config(config: FormBuilderConfig) -> None:
    """Set the global form builder configuration.

    Args:
        config: FormBuilderConfig instance
    """
    global _form_config
    _form_config = config


def get_form_config() -> FormBuilderConfig:
    """Get the current form builder configuration.

    Returns:
        Current FormBuilderConfig or default if not set
    """
    if _form_config is None:
        return FormBuilderConfig()
    return _form_config
