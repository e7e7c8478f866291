"""
Adapter pattern demo.

GcsFileStorage adapts a third-party style storage library to the
FileStorage interface the client code expects.
"""

from typing import List, Protocol, Tuple


class FileStorage(Protocol):
    def save(self, file: str) -> None:
        ...


class GoogleCloudStorageLibrary:
    """Adaptee: an existing API we cannot change."""

    def __init__(self):
        self.uploads: List[Tuple[str, str]] = []

    def upload_file(self, project_name: str, file: str) -> None:
        self.uploads.append((project_name, file))
        print(f"File upload to GCS, project: {project_name}, file content: {file}")


class GcsFileStorage:
    """Adapter: implements FileStorage by delegating to the library."""

    BOOTCAMP_PROJECT = "bootcamp"

    def __init__(self, storage_library: GoogleCloudStorageLibrary):
        self.storage_library = storage_library

    def save(self, file: str) -> None:
        """Upload the file content under the bootcamp project."""
        self.storage_library.upload_file(self.BOOTCAMP_PROJECT, file)


def main():
    file_storage: FileStorage = GcsFileStorage(GoogleCloudStorageLibrary())
    file_storage.save("Hello World")


if __name__ == '__main__':
    main()
