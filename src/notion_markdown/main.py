import asyncio
import logging
from pathlib import Path
from typing import Optional
from notion_markdown.api.client import NotionClient
from notion_markdown.config import load_settings
from notion_markdown.errors import NotionMarkdownError


async def list_pages():
    """Print every page shared with the integration."""
    async with NotionClient() as client:
        pages = await client.list_shared_pages()

    if not pages:
        print("\nNo shared pages found.")
        return

    print("\nShared Pages:")
    for page in pages:
        print(f"- {page.title} ({page.type})")
        print(f"  URL: {page.url}")
        print(f"  ID: {page.id}\n")


async def export_page(page_id: str, output: Optional[str] = None) -> str:
    """Render a page to Markdown and write it to `output`, or stdout if empty."""
    async with NotionClient() as client:
        markdown = await client.render_page(page_id)

    if output:
        Path(output).write_text(markdown + "\n", encoding="utf-8")
        print(f"\nPage {page_id} written to {output}")
    else:
        print()
        print(markdown)

    return markdown


def main():
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"\nError: invalid configuration: {e}")
        return

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    while True:
        print("\nnotion to markdown\n---")
        print("1. list shared pages")
        print("2. export a page to markdown")
        print("3. bye!")

        choice = input("\nenter your choice (1-3): ")

        try:
            if choice == "1":
                asyncio.run(list_pages())
            elif choice == "2":
                page_id = input("\nenter the page ID: ").strip()
                if not page_id:
                    print("\nNo page ID provided.")
                    continue
                output = input("output file (default: print to screen): ").strip()
                asyncio.run(export_page(page_id, output or None))
            elif choice == "3":
                print("\ngoodbye!")
                break
            else:
                print("\ninvalid choice. please try again.")
        except (NotionMarkdownError, ValueError, OSError) as e:
            print(f"\nError: {e}")


if __name__ == "__main__":
    main()
