"""
Pagewise Quick Start Example

Paginate a SQLAlchemy table three ways in a couple of minutes.

Features covered:
- Repository pagination with search criteria
- Query-object pagination (hydrated records)
- Raw-row pagination
- Tracing

Requires aiosqlite. Run with: python example_quickstart.py
"""

import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.pool import StaticPool

from pagewise import (
    FromRawQuery,
    Query,
    Repository,
    add_listener,
    enable_tracing,
    paginate,
    paginate_query,
    paginate_repository,
)


# ============================================================================
# 1. DEFINE YOUR MODELS
# ============================================================================


class Base(DeclarativeBase):
    pass


class BlogPost(Base):
    """A blog post with a view counter."""

    __tablename__ = "blog_posts"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str]
    category: Mapped[str]
    views: Mapped[int] = mapped_column(default=0)


# ============================================================================
# 2. ASYNC MAIN FUNCTION
# ============================================================================


async def main():
    """Run the quickstart example."""

    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    enable_tracing()
    add_listener(lambda e: print(f"   [trace] {e.strategy} on {e.source}: {e.duration_ms:.1f}ms"))

    async with session_factory() as session:
        session.add_all(
            BlogPost(title=f"Post {i}", category="tech" if i % 2 else "life", views=i * 3)
            for i in range(25)
        )
        await session.commit()
        print("✅ Seeded 25 posts\n")

        # ====== REPOSITORY ======
        print("1️⃣  REPOSITORY - Second page of tech posts, most viewed first")
        result = await paginate_repository(
            Repository(session, BlogPost),
            {"page": 2, "limit": 5},
            {"where": {"category": "tech"}, "order": {"views": "DESC"}},
        )
        print(f"   Titles: {[post.title for post in result.items]}")
        print(f"   Meta: {result.meta.to_dict()}")

        # ====== QUERY OBJECT ======
        print("\n2️⃣  QUERY - Posts with more than 30 views")
        query = Query.of(session, BlogPost).where(BlogPost.views > 30).order_by(BlogPost.id)
        result = await paginate_query(query, {"page": 1, "limit": 10})
        print(f"   Got {len(result.items)} of {result.meta.total_items}")

        # ====== RAW ROWS ======
        print("\n3️⃣  RAW - Titles and views only")
        raw = Query(session, select(BlogPost.title, BlogPost.views).order_by(BlogPost.views))
        result = await paginate(FromRawQuery(raw), {"page": 3, "limit": 10})
        print(f"   Rows: {result.items}")
        print(f"   Page {result.meta.current_page} of {result.meta.total_pages}")

        # ====== OUT OF RANGE ======
        print("\n4️⃣  GUARD - Page -1 through the repository")
        result = await paginate_repository(Repository(session, BlogPost), {"page": -1, "limit": 5})
        print(f"   {result.to_dict()}")

    await engine.dispose()
    print("\n✅ All operations completed successfully!")


# ============================================================================
# 3. RUN THE EXAMPLE
# ============================================================================

if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("PAGEWISE QUICKSTART EXAMPLE")
    print("=" * 60 + "\n")

    asyncio.run(main())
