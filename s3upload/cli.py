"""
Command-line interface for the sync tool.
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .exceptions import ConfigurationError, SyncError
from .models import DEFAULT_ACL, SyncConfig
from .syncer import DirectorySync

logger = logging.getLogger(__name__)

PROGRAM_NAME = "s3upload"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application.
    
    Args:
        verbose: Whether to enable debug logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    # Keep -verbose about the sync itself, not HTTP internals
    for name in ('boto3', 'botocore', 'urllib3', 's3transfer'):
        logging.getLogger(name).setLevel(logging.WARNING)


def load_config(config_file: Optional[Path] = None) -> dict:
    """Load transport settings from a JSON file.
    
    Args:
        config_file: Path to config file
        
    Returns:
        Dictionary of configuration values
        
    Raises:
        ConfigurationError: If the file cannot be read or is not a JSON object
    """
    if not config_file:
        return {}
        
    try:
        with open(config_file) as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Error loading config file {config_file}: {e}") from e
        
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_file} must contain a JSON object")
    return data


def parse_ignore_names(value: Optional[str]) -> frozenset:
    """Split a comma-separated ignore list, dropping empty entries."""
    if not value:
        return frozenset()
    return frozenset(name for name in value.split(',') if name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Upload new and changed files from a local directory to an S3 bucket",
        add_help=False
    )
    parser.add_argument('-h', '-help', '--help', action='help',
                        help="Show this help and exit")
    parser.add_argument('-bucket', '--bucket', required=True,
                        help="S3 bucket name (required)")
    parser.add_argument('-dir', '--dir', dest='dir', required=True,
                        help="Local directory (required)")
    parser.add_argument('-v', '-verbose', '--verbose', action='store_true',
                        help="Print extra log messages")
    parser.add_argument('-recursive', '--recursive', action='store_true',
                        help="Recurse into sub-directories")
    parser.add_argument('-include-unknown-mime-types', '--include-unknown-mime-types',
                        dest='include_unknown_mime_types', action='store_true',
                        help="Upload files with unknown mime types as application/octet-stream")
    parser.add_argument('-ignore', '--ignore', default="",
                        help="Comma-separated list of files/directories to ignore")
    parser.add_argument('-s3-prefix', '--s3-prefix', dest='s3_prefix', default="",
                        help="Prefix for S3 object keys")
    parser.add_argument('-c', '-config', '--config', type=Path,
                        help="Path to JSON config file (region, endpoint_url, acl, content_types)")
    return parser


def create_config(args: argparse.Namespace) -> SyncConfig:
    """Build the run configuration from parsed arguments and the config file.
    
    Args:
        args: Command line arguments
        
    Returns:
        Validated SyncConfig
    """
    file_config = load_config(args.config)
    
    return SyncConfig(
        bucket=args.bucket,
        local_dir=Path(args.dir),
        recursive=args.recursive,
        include_unknown_mime_types=args.include_unknown_mime_types,
        ignore_names=parse_ignore_names(args.ignore),
        s3_prefix=args.s3_prefix,
        region=file_config.get('region'),
        endpoint_url=file_config.get('endpoint_url'),
        acl=file_config.get('acl', DEFAULT_ACL),
        extra_content_types=file_config.get('content_types', {})
    )


def run(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, run one sync and return the process exit code.
    
    Args:
        argv: Arguments without the program name; sys.argv is used when None
        
    Returns:
        0 on success, 2 for usage or configuration errors, 1 when the sync aborts
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return int(e.code or 0)
        
    setup_logging(args.verbose)
    
    try:
        config = create_config(args)
    except ConfigurationError as e:
        logger.error(f"{e}: use '{PROGRAM_NAME} -help' for usage")
        return 2
        
    try:
        DirectorySync(config).run()
    except SyncError as e:
        logger.error(f"Sync aborted: {e}")
        return 1
        
    return 0


def main() -> None:
    """Main entry point for the CLI."""
    sys.exit(run())


if __name__ == '__main__':
    main()
