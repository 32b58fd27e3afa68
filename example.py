#!/usr/bin/env python3
"""
Example usage of the YAML Transcoder.

This script converts a JSON document to YAML, reads the YAML back,
and reformats a hand-written YAML file with four-space indentation.
"""

import json
from yaml_transcoder import JsonYamlTranscoder


def main():
    """Main example function."""
    print("YAML Transcoder Example")
    print("=" * 50)

    sample_data = {
        "service": {
            "name": "checkout",
            "replicas": 3,
            "endpoint": "http://checkout.internal:8080",
            "debug": False
        },
        "routes": [
            {"path": "/cart", "methods": ["GET", "POST"]},
            {"path": "/pay", "methods": ["POST"]}
        ],
        "owner": None
    }

    transcoder = JsonYamlTranscoder(enable_profiling=True)

    print("\n📄 JSON to YAML:")
    result = transcoder.json_to_yaml(json.dumps(sample_data))
    if not result.success:
        print(f"❌ Conversion failed: {result.error_message}")
        return
    print(result.output)

    print("\n🔁 YAML back to JSON:")
    back = transcoder.yaml_to_json(result.output)
    print(back.output)
    print(f"Round trip matches: {json.loads(back.output) == sample_data}")

    print("\n🧹 Reformatting hand-written YAML:")
    hand_written = "\n".join([
        "# staging overrides",
        "service:",
        "    replicas: 1   # keep it small",
        "routes:",
        "- path: /cart",
        "  methods:",
        "  - GET",
    ])
    formatted = JsonYamlTranscoder(indent_width=4).reformat_yaml(hand_written)
    print(formatted.output)
    for warning in formatted.warnings:
        print(f"⚠️  {warning}")

    print()
    print(transcoder.profiler.export_metrics("summary"))


if __name__ == "__main__":
    main()
