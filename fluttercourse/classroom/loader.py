"""
CourseLoader - Read-only course catalog built from course.yaml.

Provides:
- Modules and lessons in declared order
- O(1) lesson lookup by id
- Lazy loading of lesson markdown bodies
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from fluttercourse.config import DEFAULT_LESSONS_DIR, DEFAULT_MANIFEST_PATH
from fluttercourse.errors import CatalogError, LessonNotFound, ModuleNotFound
from fluttercourse.schemas import CourseManifest, Lesson, Module
from fluttercourse.utils import load_manifest

logger = logging.getLogger(__name__)


class CourseLoader:
    """
    Course catalog (modules and lessons).

    Built once at construction and never mutated afterwards. Declared order
    is authoritative: order_index values must increase in declaration order.
    """

    def __init__(
        self,
        modules: Iterable[Module] = (),
        lessons_dir: Optional[Path] = None,
        title: str = "Flutter Course",
    ):
        """
        Initialize loader from already-built modules.

        Args:
            modules: Modules in navigation order
            lessons_dir: Directory that lesson content_ref paths are relative to
            title: Course title for display

        Raises:
            CatalogError: On duplicate ids or out-of-order indices
        """
        self.title = title
        self.lessons_dir = Path(lessons_dir) if lessons_dir else DEFAULT_LESSONS_DIR
        self._modules: tuple[Module, ...] = tuple(modules)
        self._module_index: dict[str, Module] = {}
        self._lesson_index: dict[str, Lesson] = {}
        self._build_indexes()
        self._total_lessons = len(self._lesson_index)

    @classmethod
    def from_modules(
        cls,
        modules: Iterable[Module],
        lessons_dir: Optional[Path] = None,
    ) -> "CourseLoader":
        """Build the catalog from static module definitions."""
        return cls(modules, lessons_dir=lessons_dir)

    @classmethod
    def from_manifest(
        cls,
        manifest_path: Optional[Path] = None,
        lessons_dir: Optional[Path] = None,
    ) -> "CourseLoader":
        """
        Load the catalog from a YAML manifest.

        Args:
            manifest_path: Path to course.yaml (default: bundled course)
            lessons_dir: Lessons directory (default: "lessons" next to the manifest)
        """
        path = Path(manifest_path) if manifest_path else DEFAULT_MANIFEST_PATH
        manifest = load_manifest(path)
        if lessons_dir is None:
            lessons_dir = path.parent / "lessons"
        loader = cls.from_course_manifest(manifest, lessons_dir=lessons_dir)
        logger.info(
            f"Loaded course '{loader.title}' from {path}: "
            f"{len(loader.get_all_modules())} modules, {loader.get_total_lesson_count()} lessons"
        )
        return loader

    @classmethod
    def from_course_manifest(
        cls,
        manifest: CourseManifest,
        lessons_dir: Optional[Path] = None,
    ) -> "CourseLoader":
        """Build the catalog from an already-validated manifest."""
        modules = []
        for module_pos, raw_module in enumerate(manifest.modules):
            module_order = raw_module.order_index if raw_module.order_index is not None else module_pos
            lessons = tuple(
                Lesson(
                    id=raw_lesson.id,
                    title=raw_lesson.title,
                    module_id=raw_module.id,
                    order_index=(
                        raw_lesson.order_index if raw_lesson.order_index is not None else lesson_pos + 1
                    ),
                    content_ref=raw_lesson.content_ref,
                    challenge=raw_lesson.challenge,
                )
                for lesson_pos, raw_lesson in enumerate(raw_module.lessons)
            )
            modules.append(Module(
                id=raw_module.id,
                title=raw_module.title,
                description=raw_module.description,
                order_index=module_order,
                lessons=lessons,
            ))
        return cls(modules, lessons_dir=lessons_dir, title=manifest.title)

    def _build_indexes(self):
        """Index modules and lessons by id, validating the catalog."""
        previous_module_order: Optional[int] = None
        for module in self._modules:
            if module.id in self._module_index:
                raise CatalogError(f"Duplicate module id: {module.id}")
            if previous_module_order is not None and module.order_index <= previous_module_order:
                raise CatalogError(
                    f"Module {module.id} has order_index {module.order_index}, "
                    f"expected greater than {previous_module_order}"
                )
            previous_module_order = module.order_index
            self._module_index[module.id] = module

            previous_lesson_order: Optional[int] = None
            for lesson in module.lessons:
                if lesson.id in self._lesson_index:
                    raise CatalogError(f"Duplicate lesson id: {lesson.id}")
                if lesson.module_id != module.id:
                    raise CatalogError(
                        f"Lesson {lesson.id} declares module {lesson.module_id} "
                        f"but is listed under {module.id}"
                    )
                if previous_lesson_order is not None and lesson.order_index <= previous_lesson_order:
                    raise CatalogError(
                        f"Lesson {lesson.id} has order_index {lesson.order_index}, "
                        f"expected greater than {previous_lesson_order}"
                    )
                previous_lesson_order = lesson.order_index
                self._lesson_index[lesson.id] = lesson

    # -------------------------------------------------------------------------
    # Modules
    # -------------------------------------------------------------------------

    def get_all_modules(self) -> list[Module]:
        """Get all modules in navigation order."""
        return list(self._modules)

    def get_module(self, module_id: str) -> Module:
        """Get a module by ID."""
        try:
            return self._module_index[module_id]
        except KeyError:
            raise ModuleNotFound(module_id) from None

    def get_lessons_for_module(self, module_id: str) -> list[Lesson]:
        """Get all lessons of a module, in order."""
        return list(self.get_module(module_id).lessons)

    # -------------------------------------------------------------------------
    # Lessons
    # -------------------------------------------------------------------------

    def get_lesson(self, lesson_id: str) -> Lesson:
        """
        Get a lesson by ID.

        Raises:
            LessonNotFound: If the id is not in the catalog
        """
        try:
            return self._lesson_index[lesson_id]
        except KeyError:
            raise LessonNotFound(lesson_id) from None

    def has_lesson(self, lesson_id: str) -> bool:
        return lesson_id in self._lesson_index

    def get_all_lessons(self) -> list[Lesson]:
        """Get all lessons ordered by module then lesson position."""
        return [lesson for module in self._modules for lesson in module.lessons]

    def get_module_for_lesson(self, lesson_id: str) -> Module:
        """Resolve a lesson's owning module."""
        return self.get_module(self.get_lesson(lesson_id).module_id)

    def get_total_lesson_count(self) -> int:
        """Get total number of lessons across all modules."""
        return self._total_lessons

    # -------------------------------------------------------------------------
    # Lesson Content
    # -------------------------------------------------------------------------

    def get_lesson_path(self, lesson: Lesson) -> Path:
        """Resolve a lesson's markdown file path."""
        return self.lessons_dir / lesson.content_ref

    def load_lesson_content(self, lesson: Lesson) -> str:
        """
        Load the markdown body for a lesson.

        Never raises for missing, unreadable or undecodable files; returns a markdown
        placeholder describing the problem instead.
        """
        path = self.get_lesson_path(lesson)
        if not path.exists():
            logger.warning(f"Lesson content missing for {lesson.id}: {path}")
            return (
                "# Lesson Not Found\n\n"
                f"The lesson content for **{lesson.title}** could not be loaded.\n\n"
                f"Expected path: `{path}`"
            )

        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read lesson {lesson.id} from {path}: {e}")
            return (
                "# Error Loading Lesson\n\n"
                "An error occurred while loading this lesson:\n\n"
                f"```\n{e}\n```"
            )

    def find_missing_content(self) -> list[Lesson]:
        """Get lessons whose markdown file does not exist."""
        return [
            lesson for lesson in self.get_all_lessons()
            if not self.get_lesson_path(lesson).is_file()
        ]
