#!/usr/bin/env python3
"""
validate_course.py - Check the course manifest and lesson files.

Loads course.yaml exactly as the app does, then checks that every
lesson's markdown file exists.

Usage:
  python scripts/validate_course.py
  python scripts/validate_course.py --manifest path/to/course.yaml --lessons-dir path/to/lessons
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

from fluttercourse.classroom import CourseLoader
from fluttercourse.config import LOG_FORMAT, get_settings
from fluttercourse.errors import CatalogError

load_dotenv(PROJECT_ROOT / ".env")

logger = logging.getLogger(__name__)


def validate(manifest_path: Path, lessons_dir: Optional[Path]) -> int:
    """
    Validate a course.

    Returns:
        Process exit code (0 when the course is valid)
    """
    try:
        loader = CourseLoader.from_manifest(manifest_path, lessons_dir)
    except CatalogError as e:
        logger.error(str(e))
        return 1

    modules = loader.get_all_modules()
    logger.info(f"Course: {loader.title}")
    logger.info(f"  Modules: {len(modules)}")
    logger.info(f"  Lessons: {loader.get_total_lesson_count()}")
    for module in modules:
        challenges = sum(1 for lesson in module.lessons if lesson.has_challenge)
        logger.info(f"  {module.id}: {module.lesson_count} lessons, {challenges} challenges")

    missing = loader.find_missing_content()
    for lesson in missing:
        logger.error(f"Missing content for {lesson.id}: {loader.get_lesson_path(lesson)}")

    if missing:
        logger.error(f"{len(missing)} lesson file(s) missing")
        return 1

    logger.info("Course is valid")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Validate the course manifest and lesson files")
    parser.add_argument(
        "--manifest",
        type=Path,
        default=settings.manifest_path,
        help="Path to course.yaml",
    )
    parser.add_argument(
        "--lessons-dir",
        type=Path,
        default=None,
        help="Lessons directory (default: 'lessons' next to the manifest)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    return validate(args.manifest, args.lessons_dir)


if __name__ == "__main__":
    sys.exit(main())
