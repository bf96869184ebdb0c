import json
import logging
import time

from model_search import config
from model_search.searching import Searchable


class IndexModel(Searchable):
    """Ad-hoc model searching the index configured in the environment."""

    index_name = config.SEARCH_INDEX_NAME
    document_type = config.SEARCH_DOCUMENT_TYPE


# ============================================================
# Small demo / examples
# ============================================================

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Validate required environment variables
    if not config.SEARCH_INDEX_NAME:
        print("❌ Error: Missing required environment variables")
        print("Please ensure the following are set in your .env file:")
        print("  - SEARCH_INDEX_NAME")
        print("  - SEARCH_ENGINE_URL (default http://localhost:9200)")
        exit(1)

    print(f"=== Search Query Interface ({config.SEARCH_ENGINE_URL}) ===")
    print("Type a query string, a JSON body, or 'exit' to quit\n")

    while True:
        # Get user input
        try:
            user_query = input("Enter your query: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\nExiting...")
            break

        # Check for exit command
        if user_query.lower() in ['exit', 'quit', 'q']:
            print("Exiting...")
            break

        # Skip empty queries
        if not user_query:
            continue

        print("\n==============================")
        print("User query:", user_query)

        t1_input_received = time.time()

        try:
            response = IndexModel.search(user_query)

            # Show what we're sending
            print("Definition:", json.dumps(response.search.definition.to_dict(), indent=2))

            t2_before_search = time.time()

            # Reading the response executes the search
            result = response.response

            t3_response_received = time.time()

            print(f"Hits: {len(response)} of {response.total}")
            print("Response JSON:")
            print(json.dumps(result, indent=2))

            # Calculate time breakdowns in milliseconds
            time_building_ms = (t2_before_search - t1_input_received) * 1000
            time_search_ms = (t3_response_received - t2_before_search) * 1000
            time_total_ms = (t3_response_received - t1_input_received) * 1000

            print("\n[PERFORMANCE BREAKDOWN]")
            print(f"  1. Request building: {time_building_ms:.2f} ms")
            print(f"  2. Search call (network + processing): {time_search_ms:.2f} ms")
            print(f"  3. Total time: {time_total_ms:.2f} ms")
            print("\n")

        except Exception as e:
            print(f"\n❌ Error processing query: {e}")
            print("Please try again.\n")
