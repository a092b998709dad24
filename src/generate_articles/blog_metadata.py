"""Render the Next.js integration files written next to generated articles."""

from __future__ import annotations

import json
from typing import Any, Iterable

from generate_articles.models import BlogPost

BLOG_TS_FILE = "blog.ts"
README_FILE = "README.md"

BLOG_TS_HEADER = """// Auto-generated by blog-builder
// Copy this file to your Next.js project's lib/ directory

export interface BlogPost {
  slug: string;
  title: string;
  subtitle: string;
  category: string;
  readTime: string;
  gradient: string;
  pattern: "dots" | "grid" | "waves" | "circuit";
  tags: string[];
  publishedAt: string;
}

export const blogPosts: BlogPost[] = """

BLOG_TS_FUNCTIONS = """;

export function getBlogPost(slug: string): BlogPost | undefined {
  return blogPosts.find((post) => post.slug === slug);
}

export function getAllBlogSlugs(): string[] {
  return blogPosts.map((post) => post.slug);
}

export function getBlogPostsByCategory(category: string): BlogPost[] {
  return blogPosts.filter((post) => post.category === category);
}

export function getAllCategories(): string[] {
  return [...new Set(blogPosts.map((post) => post.category))];
}
"""

README = """# Generated Blog Content

This directory contains blog articles generated by blog-builder.

## File Structure

Each article folder contains:
- `article.md` - Full-length markdown article with Mermaid diagrams
- `medium.md` - Medium-optimized version with hero image specification
- `linkedin.md` - LinkedIn-optimized version (under 3000 characters)
- `metadata.json` - Article metadata (title, tags, etc.)

## Integration with Next.js

### 1. Copy the blog metadata file
```bash
cp blog.ts your-nextjs-project/lib/blog.ts
```

### 2. Create blog components
Add a Mermaid renderer and a hero component that draws the gradient and pattern of each post.

### 3. Create individual article pages
For each article, create `app/blog/[slug]/page.tsx` using the article.md content.

## Mermaid Diagrams

Articles include Mermaid code blocks that can be:
1. Rendered client-side using the mermaid npm package
2. Pre-rendered to SVG using mermaid-cli
3. Rendered via mermaid.live for static sites

## Hero Images

The Medium versions include hero image specifications with:
- Gradient colors (Tailwind CSS format)
- Pattern overlay type
- Recommended dimensions (1200x630px)

Generate actual images from these specifications with:
- Figma or Canva gradient backgrounds
- CSS-to-image services
- AI image generation with gradient prompts
"""


def build_blog_posts(metadata_records: Iterable[dict[str, Any]]) -> list[BlogPost]:
    """Map metadata.json records to blog posts, keeping their order."""
    return [BlogPost.from_metadata(record) for record in metadata_records]


def render_blog_ts(posts: list[BlogPost]) -> str:
    posts_json = json.dumps([p.to_dict() for p in posts], indent=2, ensure_ascii=False)
    return BLOG_TS_HEADER + posts_json + BLOG_TS_FUNCTIONS


def render_readme() -> str:
    return README
