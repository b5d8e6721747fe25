from .connector import Connector


class File:
    """Handle to a single blob in a storage

    Parameters
    ----------
    connector: Connector
        Storage where the file lives
    path: str
        Path to the file in the storage
    """

    def __init__(self, connector: Connector, path: str):
        self.connector = connector
        self.path = path

    def get_content(self) -> bytes:
        return self.connector.read_file(self.path, binary=True).getvalue()

    def set_content(self, data: bytes) -> None:
        self.connector.save_file(data, self.path, binary=True)

    def exists(self) -> bool:
        return self.connector.exists(self.path)

    def __repr__(self) -> str:
        return f'File(path="{self.path}")'
