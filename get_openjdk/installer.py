"""The install pipeline: probe, download, extract, link."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .archive import ensure_extracted
from .args import InstallArgs, validate_install_dir
from .console import announce, log
from .context import AppContext
from .downloader import fetch_archive
from .headers import extract_attachment_filename
from .lifecycle import RunContext
from .locator import binary_latest_url, create_probe_file, probe_headers, read_probe_file
from .symlink import SymlinkUpdate, update_symlink


@dataclass(frozen=True)
class InstallResult:
    archive: Path
    jdk_dir: Path
    extracted: bool
    symlink: SymlinkUpdate


def install_latest_jdk(args: InstallArgs, run: RunContext, context: AppContext) -> InstallResult:
    install_dir = validate_install_dir(args.install_dir)
    announce("cd", str(install_dir))

    run.probe_path = create_probe_file(install_dir)
    log(f"probe file: {run.probe_path.name}")

    url = binary_latest_url(args.jdk_version, context.api_base_url)
    probe = probe_headers(url, run.probe_path, context)

    announce("...", "|", "grep", "--ignore-case", "^content-disposition: attachment; filename=")
    filename = extract_attachment_filename(read_probe_file(run.probe_path))
    log(f"{filename} (HTTP {probe.status_code} from {probe.final_url})")

    archive = fetch_archive(url, filename, install_dir, context)
    jdk_dir, extracted = ensure_extracted(archive, install_dir)
    link = update_symlink(install_dir, args.jdk_version, jdk_dir.name)

    announce("ls", "-l", link.link.name)
    log(f"{link.link} -> {link.target} ({link.action})")
    return InstallResult(
        archive=archive,
        jdk_dir=jdk_dir,
        extracted=extracted,
        symlink=link,
    )
