"""
Example: Detecting text in a PDF stored in Cloud Storage.

The results are written as JSON files next to the given output prefix.

Prerequisites:
- Set env variables (you can specify them in an .env file):
    - VISION_ACCESS_TOKEN=<token>
"""

import asyncio
import sys

from cloudvision import PollingSettings, Vision
from cloudvision.exceptions import OperationFailedError
from cloudvision.types import FeatureType


async def main(source_uri: str, destination_uri: str):
    async with Vision() as vision:
        # documents take a while, there is no need to poll often
        client = vision.image_annotator(
            polling=PollingSettings(initial_delay=5, multiplier=1.5, max_delay=30, total_timeout=900)
        )

        operation = await client.async_batch_annotate_files(
            {
                "requests": [
                    {
                        "input_config": {
                            "gcs_source": {"uri": source_uri},
                            "mime_type": "application/pdf",
                        },
                        "features": [{"type": FeatureType.DOCUMENT_TEXT_DETECTION}],
                        "output_config": {
                            "gcs_destination": {"uri": destination_uri},
                            "batch_size": 2,
                        },
                    }
                ]
            }
        )
        operation.on_metadata(lambda metadata: print(f"{operation.name}: {metadata.state}"))

        try:
            response = await operation.result()
        except OperationFailedError as e:
            print(f"Annotation failed: {e.message}")
            return

        for file_response in response.responses:
            print(f"Output written to {file_response.output_config.gcs_destination.uri}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1], sys.argv[2]))
