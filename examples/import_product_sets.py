"""
Example: Importing product sets from a CSV file in Cloud Storage.

Prerequisites:
- Set env variables (you can specify them in an .env file):
    - VISION_ACCESS_TOKEN=<token>
    - VISION_PROJECT_ID=<project>

Usage:
    python examples/import_product_sets.py us-west1 gs://cloud-samples-data/vision/product_search/product_sets.csv
"""

import argparse
import asyncio

from cloudvision import Vision
from cloudvision.config import default_config
from cloudvision.types import BatchOperationMetadata, ImportProductSetsResponse


async def main(project_id: str, location: str, gcs_uri: str):
    async with Vision() as vision:
        client = vision.product_search()

        operation = await client.import_product_sets(
            {
                "parent": client.location_path(project_id, location),
                "input_config": {"gcs_source": {"csv_file_uri": gcs_uri}},
            }
        )
        print(f"Processing operation name: {operation.name}")

        @operation.on_metadata
        def report(metadata: BatchOperationMetadata):
            print(f"Operation state: {metadata.state}")

        response: ImportProductSetsResponse = await operation.result()
        print("Processing done.")

        for i, status in enumerate(response.statuses):
            # code 0 means the line of the CSV file was imported
            if status.code == 0:
                print(f"Reference image name: {response.reference_images[i].name}")
            else:
                print(f"Status code not OK: {status.message}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Import product sets from a CSV file.")
    parser.add_argument("location", help="Compute region, e.g. us-west1")
    parser.add_argument("gcs_uri", help="Cloud Storage URI of the CSV file")
    parser.add_argument("--project-id", default=None, help="Defaults to VISION_PROJECT_ID")
    args = parser.parse_args()

    project_id = args.project_id or default_config.project_id
    if not project_id:
        parser.error("No project id given, pass --project-id or set VISION_PROJECT_ID")
    asyncio.run(main(project_id, args.location, args.gcs_uri))
