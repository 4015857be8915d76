#!/usr/bin/env python3
"""Batch script to upload every PDF in a folder to a running StudyForge server."""
import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List

import httpx

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.utils.logger import logger


def upload_pdf_file(client: httpx.Client, file_path: Path) -> Dict[str, Any]:
    """
    Upload a single PDF file.

    Args:
        client: HTTP client bound to the server base URL
        file_path: Path to PDF file

    Returns:
        Dictionary with upload results
    """
    result = {"file": str(file_path), "success": False, "document_id": None, "error": None}
    try:
        with open(file_path, "rb") as fh:
            response = client.post(
                "/api/documents",
                files={"file": (file_path.name, fh, "application/pdf")}
            )
        response.raise_for_status()
        document = response.json()
        result["success"] = True
        result["document_id"] = document["id"]
        logger.info(f"Uploaded {file_path.name} -> {document['id']} ({document['fileSize']} bytes)")
    except httpx.HTTPStatusError as e:
        result["error"] = f"{e.response.status_code}: {e.response.text[:200]}"
        logger.error(f"Failed to upload {file_path.name}: {result['error']}")
    except (httpx.HTTPError, OSError) as e:
        result["error"] = str(e)
        logger.error(f"Failed to upload {file_path.name}: {str(e)}")
    return result


def upload_folder(folder: Path, base_url: str, recursive: bool = False) -> List[Dict[str, Any]]:
    pattern = "**/*.pdf" if recursive else "*.pdf"
    pdf_files = sorted(folder.glob(pattern))
    if not pdf_files:
        logger.warning(f"No PDF files found in {folder}")
        return []

    logger.info(f"Uploading {len(pdf_files)} PDF file(s) from {folder} to {base_url}")
    with httpx.Client(base_url=base_url, timeout=60.0) as client:
        return [upload_pdf_file(client, path) for path in pdf_files]


def main() -> int:
    parser = argparse.ArgumentParser(description="Upload a folder of PDFs to StudyForge")
    parser.add_argument("folder", type=Path, help="Folder containing PDF files")
    parser.add_argument("--base-url", default="http://localhost:8000", help="Server base URL")
    parser.add_argument("--recursive", action="store_true", help="Include subfolders")
    args = parser.parse_args()

    if not args.folder.is_dir():
        logger.error(f"Folder not found: {args.folder}")
        return 1

    results = upload_folder(args.folder, args.base_url, args.recursive)
    failed = [r for r in results if not r["success"]]
    logger.info(f"Done: {len(results) - len(failed)} uploaded, {len(failed)} failed")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
