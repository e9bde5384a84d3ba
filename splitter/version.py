from importlib.metadata import version, PackageNotFoundError

def get_app_version() -> str:
    """
    Получает версию пакета через importlib.metadata.
    Работает, если пакет установлен в текущее окружение.
    """
    try:
        # Имя должно совпадать с name в pyproject.toml
        return version("ternary-splitter")
    except PackageNotFoundError:
        return "Unknown (Package not found)"
