"""
Blog Store.

Data access layer for blog records. Holds the authoritative ordered
collection in memory and mirrors it to a single JSON file. Reads are
served from memory; every mutation rewrites the whole file.

Storage failures never propagate: a file that cannot be read or parsed
loads as an empty collection, and a failed write leaves the in-memory
state ahead of the disk. Both are logged at error level.
"""

import json
from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from blogapi.backend.core.logging import get_logger
from blogapi.backend.schemas.blog import Blog

logger = get_logger(__name__)

_BLOG_LIST = TypeAdapter(list[Blog])


class BlogStore:
    """
    In-memory collection of blog records backed by a JSON file.

    Usage:
        store = BlogStore(Path("data/blogs.json"))
        store.load()
        blog = store.create("Hello world")
    """

    def __init__(self, path: Path, indent: int = 2) -> None:
        """
        Initialize an empty store. Call load() to read the backing file.

        Args:
            path: Location of the JSON file
            indent: Indentation used when writing the file
        """
        self.path = Path(path)
        self.indent = indent
        self._blogs: list[Blog] = []
        self._last_id = 0

    @property
    def last_id(self) -> int:
        """The most recently assigned id (0 when nothing was ever assigned)."""
        return self._last_id

    def load_all(self) -> list[Blog]:
        """
        Read every record from the backing file.

        Returns:
            Records in file order, or an empty list if the file is missing,
            unreadable, not JSON, or not a list of blog records
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
            return _BLOG_LIST.validate_json(raw)
        except FileNotFoundError:
            logger.warning("Blogs file not found, starting empty", extra={"path": str(self.path)})
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error reading blogs from file", extra={"path": str(self.path), "error": str(e)})
        except PydanticValidationError as e:
            logger.error(
                "Blogs file is not a valid blog list",
                extra={"path": str(self.path), "error_count": e.error_count()},
            )
        return []

    def load(self) -> None:
        """Replace the in-memory collection with the file contents."""
        self._blogs = self.load_all()
        # max() rather than the last element: an out-of-order file must not reissue ids
        self._last_id = max((blog.id for blog in self._blogs), default=0)
        logger.info(
            "Blogs loaded",
            extra={"path": str(self.path), "count": len(self._blogs), "last_id": self._last_id},
        )

    def list_all(self) -> list[Blog]:
        """Return the full collection in insertion order."""
        return self._blogs

    def get_by_id(self, blog_id: int | None) -> Blog | None:
        """Return the first record with the given id, or None."""
        return next((blog for blog in self._blogs if blog.id == blog_id), None)

    def create(self, content: str) -> Blog:
        """
        Append a new record with the next id and persist.

        Args:
            content: Validated blog content

        Returns:
            The new record
        """
        self._last_id += 1
        blog = Blog(id=self._last_id, content=content)
        self._blogs.append(blog)
        self.persist(self._blogs)
        return blog

    def update(self, blog_id: int | None, content: str) -> Blog | None:
        """
        Replace a record's content in place and persist.

        Returns:
            The updated record, or None if no record has that id
        """
        blog = self.get_by_id(blog_id)
        if blog is None:
            return None
        blog.content = content
        self.persist(self._blogs)
        return blog

    def delete(self, blog_id: int | None) -> list[Blog] | None:
        """
        Remove a record and persist.

        Returns:
            The remaining records, or None if no record has that id
        """
        blog = self.get_by_id(blog_id)
        if blog is None:
            return None
        self._blogs.remove(blog)
        self.persist(self._blogs)
        return self._blogs

    def persist(self, blogs: list[Blog]) -> None:
        """Overwrite the backing file with the given records."""
        document = json.dumps(
            [blog.model_dump(mode="json") for blog in blogs],
            indent=self.indent,
            ensure_ascii=False,
        )
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(document, encoding="utf-8")
        except OSError as e:
            logger.error("Error writing blogs to file", extra={"path": str(self.path), "error": str(e)})
            return
        logger.debug("Blogs persisted", extra={"path": str(self.path), "count": len(blogs)})
