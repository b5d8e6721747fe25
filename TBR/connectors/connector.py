import io
from abc import ABC, abstractmethod
from typing import Union


class Connector(ABC):
    """
    Abstract class for all storages of source images and thumbnails
    """

    @abstractmethod
    def read_file(self, filepath: str, binary: bool) -> io.BytesIO:
        """
        Reads file content

        Parameters
        ----------
        filepath: str
            Path to file
        binary: bool
            Read file in binary mode or in text mode

        Returns
        -------
        io.BytesIO | str
            io.BytesIO object if binary, string otherwise
        """
        pass

    @abstractmethod
    def save_file(
        self, data: Union[str, bytes, io.BytesIO], filepath: str, binary: bool
    ) -> None:
        """
        Saves data to file

        Parameters
        ----------
        data: Union[str, bytes, io.BytesIO]
            Data to save
        filepath: str
            Path to file
        binary: bool
            Write file in binary mode or in text mode
        """
        pass

    @abstractmethod
    def exists(self, filepath: str) -> bool:
        pass

    @abstractmethod
    def remove(self, filepath: str) -> None:
        """
        Removes a file

        Parameters
        ----------
        filepath: str
            Path to file
        """
        pass

    @abstractmethod
    def mkdir(self, folder_path: str) -> None:
        """
        Creates a directory

        Parameters
        ----------
        folder_path: str
            Path to folder to create
        """
        pass

    @abstractmethod
    def join(self, *args: str) -> str:
        """
        Join paths like os.path.join

        Parameters
        ----------
        *args: str
            List of strings - subfolders, etc

        Returns
        -------
        str
            Joined full path
        """
        pass

    def dirname(self, filepath: str) -> str:
        return filepath.rstrip('/').rsplit('/', 1)[0]
