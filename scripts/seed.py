"""Database seeder for the news API."""
import asyncio
import argparse
import random
import time
from datetime import datetime, timezone, timedelta

from app.database import engine, async_session, Base
from app.image_encoder import encode_file, to_data_uri
from app.models import Category, News

CATEGORIES = ["Politics", "Business", "Technology", "Sports", "Health",
              "Science", "Entertainment", "World"]

AUTHORS = ["Staff Reporter", "News Desk", "Correspondent", "Editor"]


async def seed(count: int, image_path: str):
    print(f"Seeding: {len(CATEGORIES)} categories, {count} news articles")
    start = time.perf_counter()

    content_type, encoded = encode_file(image_path)
    news_image = to_data_uri(content_type, encoded)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        categories = []
        for name in CATEGORIES:
            category = Category(category_name=name)
            session.add(category)
            categories.append(category)
        await session.flush()
        print(f"  Created {len(categories)} categories")

        for i in range(count):
            category = random.choice(categories)
            session.add(News(
                title=f"{category.category_name} update #{i}",
                content=f"This is the full body of news article {i}. " * 10,
                author=random.choice(AUTHORS),
                category_id=category.id,
                add_to_slider=random.random() < 0.2,
                news_image=news_image,
                added_at=datetime.now(timezone.utc) - timedelta(minutes=random.randint(0, 60 * 24 * 30)),
            ))
        await session.commit()

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")


def main():
    parser = argparse.ArgumentParser(description="Seed the news database")
    parser.add_argument("--count", type=int, default=50, help="Number of news articles")
    parser.add_argument("--image", required=True, help="Image file embedded in every article")
    args = parser.parse_args()
    asyncio.run(seed(args.count, args.image))


if __name__ == "__main__":
    main()
