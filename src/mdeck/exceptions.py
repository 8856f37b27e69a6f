class MdeckError(Exception):
    pass


class DocumentError(MdeckError):
    pass


class DocumentNotFoundError(DocumentError):
    pass


class DocumentReadError(DocumentError):
    pass


class UnknownThemeError(MdeckError):
    pass


class SettingsError(MdeckError):
    pass
