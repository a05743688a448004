#!/usr/bin/env python3
"""
Basic SDK usage examples for the Compare and Comply client.

Demonstrates document conversion, comparison, feedback management and
batch jobs with both the async and the blocking APIs.
"""

import asyncio
import os
from pathlib import Path

from compare_comply import (
    CompareComplyError,
    CompareComplyV1,
    MissingParametersError,
)


async def convert_and_classify(client: CompareComplyV1, document: Path):
    """Convert a contract to HTML and classify its elements."""
    print("=== Conversion and Classification ===")

    html = await client.convert_to_html(
        file=document, file_content_type="application/pdf"
    )
    print(f"✓ HTML conversion returned {html.status_code}")

    elements = await client.classify_elements(file=document, model="contracts")
    print(f"✓ Found {len(elements.result.get('elements', []))} elements")


async def compare_contracts(client: CompareComplyV1, left: Path, right: Path):
    """Compare two versions of a contract."""
    print("\n=== Document Comparison ===")

    comparison = await client.compare_documents(
        file1=left,
        file2=right,
        file1_label="original",
        file2_label="amended",
    )
    aligned = comparison.result.get("aligned_elements", [])
    print(f"✓ {len(aligned)} aligned elements")


async def feedback_roundtrip(client: CompareComplyV1):
    """Submit, read back and delete a feedback entry."""
    print("\n=== Feedback ===")

    try:
        await client.add_feedback(user_id="example")
    except MissingParametersError as e:
        print(f"✓ Rejected locally: {e}")

    created = await client.add_feedback(
        feedback_data={
            "feedback_type": "element_classification",
            "location": {"begin": 241, "end": 237},
            "text": "1. IBM will provide a Senior Managing Consultant.",
        },
        comment="Category should be Responsibilities",
    )
    feedback_id = created.result["feedback_id"]
    print(f"✓ Created feedback {feedback_id}")

    pending = [
        client.submit("get_feedback", {"feedback_id": feedback_id}),
        client.submit("list_feedback", {"page_limit": 5, "include_total": True}),
    ]
    entry, listing = await asyncio.gather(*pending)
    print(f"✓ Entry status {entry.status_code}, listing status {listing.status_code}")

    await client.delete_feedback(feedback_id=feedback_id)
    print("✓ Deleted feedback")


def batch_status_sync(client: CompareComplyV1):
    """Check batch jobs with the blocking API."""
    print("\n=== Batches (sync) ===")

    batches = client.list_batches_sync()
    for batch in batches.result.get("batches", []):
        print(f"✓ {batch['batch_id']}: {batch['status']}")


async def main():
    documents = Path(os.getenv("COMPARE_COMPLY_SAMPLES", "samples"))

    async with CompareComplyV1() as client:
        try:
            await convert_and_classify(client, documents / "contract_A.pdf")
            await compare_contracts(
                client, documents / "contract_A.pdf", documents / "contract_B.pdf"
            )
            await feedback_roundtrip(client)
        except CompareComplyError as e:
            print(f"❌ Request failed: {e}")

    sync_client = CompareComplyV1()
    try:
        batch_status_sync(sync_client)
    except CompareComplyError as e:
        print(f"❌ Request failed: {e}")


if __name__ == "__main__":
    asyncio.run(main())
