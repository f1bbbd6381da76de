"""
Command-line interface for the dialog extractor
"""
import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import Config
from .core import (
    Chapter,
    Interval,
    MalformedTimestamp,
    NoIntervalsError,
    chapter_to_interval,
    consolidate,
    fragment_names,
    parse_chapter_selection,
    parse_threshold,
    render_concat_list,
    select_chapters_by_title,
    subtract,
    summarize_chapters,
    total_duration,
)
from .services import chapters as chapters_svc
from .services import subtitles as subtitles_svc
from .services.errors import ChapterMetadataError, SubtitleReadError

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def setup_logging(level: str = 'INFO', log_file: Optional[str] = None) -> None:
    """Configure root logging, optionally mirroring records to ``log_file``."""
    numeric_level = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, handlers=handlers, force=True)


def prompt_chapter_selection(chapters: List[Chapter]) -> List[int]:
    """Ask which chapters to ignore until the answer is valid.

    An empty answer selects nothing.
    """
    while True:
        answer = input("Choose chapters that should be ignored (comma-separated): ")
        try:
            return parse_chapter_selection(answer, len(chapters))
        except ValueError as e:
            print(f"Illegal choice ({e}), try again.")


def resolve_skipped_chapters(chapters: List[Chapter], skip_titles=None, skip_choice=None,
                             interactive: bool = True) -> List[Chapter]:
    """Pick the chapters to exclude.

    Chapters named in ``skip_titles`` and chapters selected by index in
    ``skip_choice`` are both excluded. When neither is given and
    ``interactive`` is set, the chapters are listed and the user is asked.
    """
    if isinstance(skip_titles, str):
        skip_titles = [skip_titles]
    elif skip_titles is not None and not isinstance(skip_titles, (list, tuple)):
        raise ValueError(f"skip_chapters must be a list of titles, got {skip_titles!r}")

    if not chapters:
        print("No chapters found, skipping step")
        return []

    skipped = select_chapters_by_title(chapters, skip_titles or [])
    indices: List[int] = []
    if skip_choice is not None:
        indices = parse_chapter_selection(skip_choice, len(chapters))
    elif not skip_titles and interactive:
        print("This video has labeled chapters:")
        for i, chapter in enumerate(chapters):
            ivl = chapter_to_interval(chapter)
            print(f"\tOption {i}: {chapter.title}\t({ivl.start} - {ivl.end})")
        indices = prompt_chapter_selection(chapters)

    for i in indices:
        if chapters[i] not in skipped:
            skipped.append(chapters[i])
    # Exclusions are applied in timeline order
    return [c for c in chapters if c in skipped]


def print_plan(intervals: List[Interval]) -> None:
    print(f"\n{'='*60}")
    print(f"Dialog intervals ({len(intervals)}):")
    print(f"{'='*60}")
    for i, interval in enumerate(intervals):
        print(f"{i:4d}. {interval.start} - {interval.end}")
    print(f"Total dialog: {total_duration(intervals)}")


def print_chapter_summary(chapter_lists: List[List[Chapter]]) -> None:
    summaries = summarize_chapters(chapter_lists)
    if not summaries:
        print("No chapters found.")
        return
    print(f"\nChapter titles across {len(chapter_lists)} videos:\n")
    for summary in summaries:
        print(f"- {summary.title or '[untitled]'} {summary.description}")


def process_one_video(subtitles_path: str, chapters_path: Optional[str], threshold,
                      skip_titles=None, skip_choice=None, interactive: bool = True,
                      concat_list_path: Optional[str] = None,
                      fragment_extension: str = 'mp3') -> List[Interval]:
    """Build the extraction plan for one video and print it.

    Returns the final intervals. Typed errors from the services and the
    engine propagate to the caller.
    """
    threshold = parse_threshold(threshold)
    cues = subtitles_svc.read_srt_cues(subtitles_path)
    dialog = consolidate(cues, threshold, logger=logger)
    logger.info("Merged %d cues into %d dialog intervals", len(cues), len(dialog))

    chapters = chapters_svc.read_chapters(chapters_path) if chapters_path else []
    skipped = resolve_skipped_chapters(chapters, skip_titles, skip_choice, interactive)
    for chapter in skipped:
        logger.info("Excluding chapter %s", chapter_to_interval(chapter))
    dialog = subtract(dialog, [chapter_to_interval(c) for c in skipped], logger=logger)

    print_plan(dialog)

    if concat_list_path:
        names = [name for name, _ in fragment_names(dialog, fragment_extension)]
        with open(concat_list_path, 'w', encoding='utf-8') as f:
            f.write(render_concat_list(names))
        print(f"Concat list: {concat_list_path}")

    return dialog


def _find_default_config() -> Optional[str]:
    cwd = os.getcwd()
    for name in ('config.yml', 'config.yaml'):
        candidate = os.path.join(cwd, name)
        if os.path.exists(candidate):
            return candidate
    return None


def main(argv=None):
    """Funzione principale CLI"""
    parser = argparse.ArgumentParser(description='Extract dialog intervals from subtitle timings')
    parser.add_argument('--config', type=str, help='Path to the YAML configuration file')
    parser.add_argument('--subtitles', type=str, help='SRT file with the dialog cues')
    parser.add_argument('--chapters', type=str, nargs='+',
                        help='ffprobe chapter JSON file(s); several files only with --summary')
    parser.add_argument('--skip', type=str, help="Chapters to ignore by index: number, list (e.g., 0,2) or 'all'")
    parser.add_argument('--skip-title', dest='skip_titles', action='append',
                        help='Chapter title to ignore (repeatable)')
    parser.add_argument('--threshold', type=str, help="Gap to bridge when merging cues (e.g., 1.5, 1.5s, 800ms)")
    parser.add_argument('--concat-list', type=str, help='Write an ffmpeg concat list of the fragments to this path')
    parser.add_argument('--log-file', type=str, help='Also write the log to this file')
    parser.add_argument('--log-level', type=str, help='Logging level (DEBUG, INFO, WARNING...)')
    parser.add_argument('--summary', action='store_true', help='Summarize chapter titles across the --chapters files')
    parser.add_argument('--no-input', action='store_true', help='Never prompt for chapters to ignore')
    args = parser.parse_args(argv)

    # Se non viene passato --config, prova a usare config.yml o config.yaml
    config = Config(config_file=args.config or _find_default_config())
    config.update_from_args({
        'threshold': args.threshold,
        'skip': args.skip,
        'skip_chapters': args.skip_titles,
        'logging': {'level': args.log_level, 'file': args.log_file},
    })

    log_config = config.get('logging') or {}
    try:
        setup_logging(log_config.get('level', 'INFO'), log_config.get('file'))
    except (ValueError, OSError) as e:
        print(f"Logging setup failed: {e}", file=sys.stderr)
        return 1

    chapter_paths = args.chapters or []
    try:
        if args.summary:
            print_chapter_summary([chapters_svc.read_chapters(p) for p in chapter_paths])
            return 0

        if not args.subtitles:
            parser.error('--subtitles is required unless --summary is given')
        if len(chapter_paths) > 1:
            parser.error('only one --chapters file can be used with --subtitles')

        process_one_video(
            args.subtitles,
            chapter_paths[0] if chapter_paths else None,
            config.get_threshold(),
            skip_titles=config.get('skip_chapters'),
            skip_choice=config.get('skip'),
            interactive=not args.no_input,
            concat_list_path=args.concat_list,
            fragment_extension=config.get('fragment_extension', 'mp3'),
        )
    except NoIntervalsError as e:
        logger.error("%s Aborting.", e)
        return 1
    except (SubtitleReadError, ChapterMetadataError, MalformedTimestamp, OSError) as e:
        logger.error("Extraction failed: %s", e)
        return 1
    except ValueError as e:
        logger.error("Invalid option: %s", e)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
