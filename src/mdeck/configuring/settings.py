from functools import reduce
from pathlib import Path
from typing import Annotated, Any, Self

from appdirs import user_config_dir as appdirs_user_config_dir
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationError

from .. import app_name
from ..components.parsing import SLIDE_DELIMITER
from ..components.themes import ThemeCatalog
from ..exceptions import SettingsError, UnknownThemeError
from ..utils import load_all_yamls

settings_file_name = f"{app_name}.yml"
_user_config_dir = Path(appdirs_user_config_dir(app_name)).resolve()


def _check_theme(name: str) -> str:
    try:
        return ThemeCatalog().by_name(name).name
    except UnknownThemeError as e:
        raise ValueError(str(e)) from e


def _check_glyph(glyph: str) -> str:
    if len(glyph) != 1:
        msg = f"the progress glyph should be a single character, got {glyph!r}"
        raise ValueError(msg)
    return glyph


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    theme: Annotated[str, AfterValidator(_check_theme)] = "Catppuccin Mocha"
    slide_delimiter: str = Field(default=SLIDE_DELIMITER, min_length=1)
    notification_delay: float = Field(default=3.0, gt=0)
    body_row: int = Field(default=4, ge=1)
    progress_glyph: Annotated[str, AfterValidator(_check_glyph)] = "█"
    title_placeholder: str = "Untitled"
    subtitle_placeholder: str = ""
    author_placeholder: str = "Anonymous"

    @classmethod
    def from_yaml(cls, workdir: Path, user_config_dir: Path | None = None) -> Self:
        """Load the settings, the working directory overriding the user directory.

        Args:
            workdir: Directory whose `mdeck.yml`, if any, has the last word.
            user_config_dir: Directory holding the user-wide `mdeck.yml`. Defaults \
                to the platform-specific user configuration directory.

        Raises:
            SettingsError: Raised if the merged settings are invalid.

        Returns:
            The validated settings.
        """
        directories = [user_config_dir or _user_config_dir, workdir.resolve()]
        content: dict[str, Any] = reduce(
            lambda a, b: {**a, **(b or {})},
            load_all_yamls(dict.fromkeys(d / settings_file_name for d in directories)),
            {},
        )
        try:
            return cls.model_validate(content)
        except ValidationError as e:
            msg = f"invalid settings:\n{e}"
            raise SettingsError(msg) from e
