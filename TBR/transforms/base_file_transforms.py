from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Literal, Optional

from tqdm.contrib.concurrent import process_map, thread_map

PoolOptions = Literal['processes', 'threads']


@dataclass
class TransformsFileData:
    """Represents one file with its metadata"""
    filepath: str
    metadata: dict[str, Any]


class BaseFilesTransforms(ABC):
    """Base class for transforms applied to many files in parallel"""

    def __init__(
        self,
        pool_type: PoolOptions,
        workers: int = 16,
        pbar: bool = True
    ):
        """
        Parameters
        ----------
        pool_type: PoolOptions
            Type of pool used for parallel processing. Available options: 'threads', 'processes'.
        workers: int = 16
            Number of parallel workers
        pbar: bool = True
            Whether to use progress bar
        """
        assert pool_type in ['processes', 'threads']
        self.pool_type = pool_type
        self.max_workers = workers
        self.pbar = pbar

    @property
    @abstractmethod
    def required_metadata(self) -> list[str]:
        """List of metadata keys needed for every file"""
        pass

    @property
    @abstractmethod
    def metadata_to_change(self) -> list[str]:
        """List of metadata keys returned by the transform"""
        pass

    @abstractmethod
    def _process_filepath(self, data: TransformsFileData) -> TransformsFileData:
        """Method that transforms one file

        Parameters
        ----------
        data: TransformsFileData
            File with its metadata

        Returns
        -------
        TransformsFileData
            Processed file with updated metadata
        """
        pass

    def run(
        self,
        paths: list[str],
        metadata_lists: Optional[dict[str, list[Any]]] = None
    ) -> list[TransformsFileData]:
        """Run transformation on files

        Parameters
        ----------
        paths: list[str]
            List of paths to files
        metadata_lists: Optional[dict[str, list[Any]]] = None
            Mapping from metadata key to its values for every file

        Returns
        -------
        list[TransformsFileData]
            List of TransformsFileData with updated metadata
        """
        if self.pool_type == 'threads':
            pool_map = thread_map
        else:
            pool_map = process_map

        if len(self.required_metadata) > 0:
            assert metadata_lists is not None and isinstance(metadata_lists, dict)
            assert all(k in metadata_lists for k in self.required_metadata)

        if metadata_lists is None:
            metadata_lists = {}
        assert all(len(paths) == len(v) for v in metadata_lists.values())

        def data_iterator() -> Iterable[TransformsFileData]:
            for i, fp in enumerate(paths):
                yield TransformsFileData(fp, {k: v[i] for k, v in metadata_lists.items()})

        transformed_metadata: list[TransformsFileData] = pool_map(
            self._process_filepath,
            data_iterator(),
            total=len(paths),
            max_workers=self.max_workers,
            disable=not self.pbar
        )
        assert all(
            set(data.metadata.keys()) == set(self.metadata_to_change) for data in transformed_metadata
        ), f"Transform must return exactly these metadata keys: {self.metadata_to_change}"
        return transformed_metadata
