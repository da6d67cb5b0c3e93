from typing import List

from pydantic import BaseModel, Field


class OpenGraphImage(BaseModel):
    url: str
    width: int
    height: int
    alt: str


class OpenGraph(BaseModel):
    title: str
    description: str
    url: str
    site_name: str
    images: List[OpenGraphImage] = Field(default_factory=list)
    locale: str = "en_US"
    type: str = "website"


class TwitterCard(BaseModel):
    card: str = "summary_large_image"
    title: str
    description: str
    images: List[str] = Field(default_factory=list)


class Robots(BaseModel):
    index: bool = True
    follow: bool = True

    @property
    def content(self) -> str:
        return ", ".join(
            [
                "index" if self.index else "noindex",
                "follow" if self.follow else "nofollow",
            ]
        )


class SiteMetadata(BaseModel):
    title: str
    description: str
    keywords: List[str] = Field(default_factory=list)
    icon: str = "/favicon.ico"
    metadata_base: str
    open_graph: OpenGraph
    twitter: TwitterCard
    robots: Robots = Field(default_factory=Robots)

    def absolute_url(self, path: str) -> str:
        """Resolve a site-relative asset path against the metadata base."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.metadata_base.rstrip('/')}/{path.lstrip('/')}"


SITE_METADATA = SiteMetadata(
    title="Makos.ai - AI Worksheet Generator for Teachers",
    description=(
        "Generate engaging and customized worksheets in seconds with Makos.ai, "
        "powered by AI. Save time and enhance student learning."
    ),
    keywords=[
        "AI",
        "worksheet",
        "generator",
        "teachers",
        "education",
        "lesson plans",
        "quiz",
        "makos.ai",
    ],
    metadata_base="https://makos.ai",
    open_graph=OpenGraph(
        title="Makos.ai - AI Worksheet Generator",
        description=(
            "Create professional worksheets in seconds with AI. Multiple question "
            "types, 40+ languages, Bloom's Taxonomy support."
        ),
        url="https://makos.ai",
        site_name="Makos.ai",
        images=[
            OpenGraphImage(
                url="/logo.png",
                width=512,
                height=512,
                alt="Makos.ai - AI Worksheet Generator for Teachers",
            )
        ],
    ),
    twitter=TwitterCard(
        title="Makos.ai - AI Worksheet Generator",
        description=(
            "Create professional worksheets in seconds with AI. "
            "Save hours of prep time!"
        ),
        images=["/logo.png"],
    ),
)
