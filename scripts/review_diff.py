#!/usr/bin/env python3
"""Manual review script - review a diff file from the command line."""

import asyncio
import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from diff_review.core.logging import setup_logging
from diff_review.llm.errors import ReviewError
from diff_review.llm.models import ReviewRequest
from diff_review.llm.prompts import DEFAULT_REVIEW_INSTRUCTIONS
from diff_review.review import review

setup_logging()


async def review_file(diff_path: Path, provider: str, use_strong_model: bool) -> bool:
    """Review a diff file and print the result."""
    print(f"\n{'='*60}")
    print(f"Reviewing {diff_path} with {provider}{' (strong model)' if use_strong_model else ''}")
    print(f"{'='*60}\n")

    request = ReviewRequest(
        diff_text=diff_path.read_text(encoding="utf-8"),
        instructions=DEFAULT_REVIEW_INSTRUCTIONS,
        provider=provider,
        api_key=os.environ.get("DIFF_REVIEW_API_KEY", ""),
        use_strong_model=use_strong_model,
    )

    try:
        result = await review(request)
    except ReviewError as e:
        print(f"Review failed [{e.kind}]: {e}")
        return False

    print(result.review_text)
    print(f"\n{'='*60}")
    print(f"Model: {result.model_used}, time: {result.processing_time:.2f}s")
    return True


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python scripts/review_diff.py <diff_file> <provider> [--pro]")
        print("Example: DIFF_REVIEW_API_KEY=... python scripts/review_diff.py changes.diff gemini")
        print("\nProviders: gemini, openai, anthropic, zhipu")
        sys.exit(1)

    diff_path = Path(sys.argv[1])
    if not diff_path.is_file():
        print(f"Diff file not found: {diff_path}")
        sys.exit(1)

    success = asyncio.run(review_file(diff_path, sys.argv[2], "--pro" in sys.argv[3:]))
    sys.exit(0 if success else 1)
