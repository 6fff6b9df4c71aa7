"""Basic usage example for the TF-IDF search engine."""

import asyncio

from tfidf_search import SearchService

SAMPLE_DOCUMENTS = [
    {"id": "1", "title": "Cats", "content": "Cats are great pets and cats are fun"},
    {"id": "2", "title": "Dogs", "content": "Dogs are loyal pets and dogs are friends"},
    {"id": "3", "title": "Cat care", "content": "Feeding cats and grooming kittens"},
    {"id": "4", "title": "Python tips",
     "content": "Python generators keep memory usage low when streaming large files"},
    {"id": "5", "title": "Gardening",
     "content": "Tomatoes need sunlight, water and patience through the summer"},
]


async def basic_search_demo():
    """Demonstrate basic search functionality."""
    print("TF-IDF Search - Basic Usage Demo")
    print("=" * 50)

    print("\n1. Initializing search service...")
    async with SearchService.create(log_level="WARNING") as service:

        print("\n2. Building search index...")
        await service.add_documents(SAMPLE_DOCUMENTS)

        stats = await service.get_stats()
        print(f"   Index contains {stats['corpus']['total_documents']} documents")
        print(f"   Vocabulary size: {stats['corpus']['total_terms']} terms")
        print(f"   Average document length: {stats['corpus']['avg_document_length']:.1f} tokens")

        print("\n3. Performing searches...")
        for query in ["cats", "loyal dogs", "streaming files", "summer sunlight", "pets"]:
            response = await service.search_with_summary(query)
            summary = response["summary"]
            print(f"\n   Query: '{query}' - {summary['result_count']} results, "
                  f"top score {summary['top_score']:.3f}")
            for i, result in enumerate(response["results"], 1):
                print(f"     {i}. {result['title']} ({result['id']}) - Score: {result['score']:.3f}")

        print("\n4. Documents similar to 'Cats'...")
        for result in await service.find_similar("1"):
            print(f"     - {result.title}: {result.score:.3f}")

        health = await service.health_check()
        print(f"\n5. System status: {health['status']}")

    print("\nDemo completed.")


if __name__ == "__main__":
    asyncio.run(basic_search_demo())
