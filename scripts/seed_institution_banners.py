#!/usr/bin/env python3
"""
Institution banner seed helper - prints ready-to-run create commands.

Development tooling. NOT for runtime use.

Checks that the content service answers on /api/health, then prints one
curl command per sample institution. Banner images must be uploaded by hand
first; replace <MEDIA_ID> with the media object returned by the upload.

Usage:
    python scripts/seed_institution_banners.py
    python scripts/seed_institution_banners.py --url http://localhost:1337

Environment:
    STRAPI_URL - Base URL of the content service (default: http://localhost:1337)

Exit codes:
    0 - Instructions printed
    1 - Service not reachable (nothing printed to stdout)
"""
import argparse
import json
import os
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

import httpx

DEFAULT_STRAPI_URL = "http://localhost:1337"
DEFAULT_TIMEOUT_S = 5.0
MEDIA_ID_PLACEHOLDER = "<MEDIA_ID>"


@dataclass(frozen=True)
class InstitutionSeed:
    name: str
    banner_title: str
    banner_subtitle: str
    banner_image_path: str


SEED_INSTITUTIONS: List[InstitutionSeed] = [
    InstitutionSeed(
        name="SONA Tech School",
        banner_title="Welcome to SONA TECH SCHOOL",
        banner_subtitle="Pioneering Technology Education for Tomorrow's Digital Leaders",
        banner_image_path="public/uploads/banners/tech-school-banner.jpg",
    ),
    InstitutionSeed(
        name="SONA Business School",
        banner_title="Welcome to SONA BUSINESS SCHOOL",
        banner_subtitle="Developing Future Business Leaders with Global Perspective",
        banner_image_path="public/uploads/banners/business-school-banner.jpg",
    ),
    InstitutionSeed(
        name="SONA Finishing School",
        banner_title="Welcome to SONA FINISHING SCHOOL",
        banner_subtitle="Excellence in Professional Development and Etiquette",
        banner_image_path="public/uploads/banners/finishing-school-banner.jpg",
    ),
    InstitutionSeed(
        name="AI Consultancy",
        banner_title="Welcome to AI CONSULTANCY",
        banner_subtitle="Cutting-Edge AI Solutions for Modern Enterprises",
        banner_image_path="public/uploads/banners/ai-consultancy-banner.jpg",
    ),
    InstitutionSeed(
        name="Contract to Hire",
        banner_title="Welcome to CONTRACT TO HIRE",
        banner_subtitle="Building Tomorrow's Workforce Through Strategic Partnerships",
        banner_image_path="public/uploads/banners/contract-to-hire-banner.jpg",
    ),
]


def get_base_url(override: Optional[str] = None) -> str:
    """
    Resolve the service base URL.

    Priority:
    1. --url argument
    2. STRAPI_URL env var
    3. Default: http://localhost:1337
    """
    url = override or os.environ.get("STRAPI_URL") or DEFAULT_STRAPI_URL
    return url.strip().rstrip("/")


def check_health(base_url: str, timeout_s: float = DEFAULT_TIMEOUT_S) -> bool:
    """GET {base_url}/api/health. Transport errors count as unhealthy."""
    try:
        response = httpx.get(f"{base_url}/api/health", timeout=timeout_s)
    except httpx.HTTPError:
        return False
    return response.is_success


def build_curl_command(institution: InstitutionSeed, base_url: str) -> str:
    """curl command creating one institution; the media id stays a placeholder."""
    fields = {
        "name": institution.name,
        "bannerTitle": institution.banner_title,
        "bannerSubtitle": institution.banner_subtitle,
    }
    data_lines = [f"      {json.dumps(key)}: {json.dumps(value)}," for key, value in fields.items()]
    data_lines.append(f'      "bannerImage": {MEDIA_ID_PLACEHOLDER}')
    body = "\n".join(["  {", '    "data": {', *data_lines, "    }", "  }"])
    # Single quotes delimit the shell argument
    body = body.replace("'", "'\\''")

    return (
        f"curl -X POST {base_url}/api/institutions \\\n"
        f'  -H "Content-Type: application/json" \\\n'
        f'  -H "Authorization: Bearer $API_TOKEN" \\\n'
        f"  -d '{body}'"
    )


def print_instructions(base_url: str, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    print(f"[OK] Content service is running at {base_url}", file=out)
    print(
        "To complete banner seeding:\n"
        "1. Upload the banner images to the media library\n"
        "2. Note the media objects returned by the upload\n"
        "3. Create the institutions with the commands below",
        file=out,
    )

    for index, institution in enumerate(SEED_INSTITUTIONS, start=1):
        print(f"\n[{index}] {institution.name} ({institution.banner_image_path})", file=out)
        print(build_curl_command(institution, base_url), file=out)

    print(f"\nReplace {MEDIA_ID_PLACEHOLDER} with the uploaded media object.", file=out)
    print("[OK] Seed instructions complete", file=out)


def run_seed(base_url: str, timeout_s: float = DEFAULT_TIMEOUT_S) -> int:
    if not check_health(base_url, timeout_s=timeout_s):
        print(
            f"[ERROR] Content service not available at {base_url} - make sure it is running",
            file=sys.stderr,
        )
        return 1

    print_instructions(base_url)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print commands that seed institutions with banners.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        "--url",
        type=str,
        default=None,
        help="Content service base URL (default: STRAPI_URL env or http://localhost:1337)"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT_S,
        help="Health check timeout in seconds"
    )

    args = parser.parse_args(argv)
    return run_seed(get_base_url(args.url), timeout_s=args.timeout)


if __name__ == "__main__":
    sys.exit(main())
