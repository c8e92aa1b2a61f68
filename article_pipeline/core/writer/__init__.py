from .markdown_writer import FilenameCollisionError, MarkdownWriter, WrittenArticle

__all__ = ["FilenameCollisionError", "MarkdownWriter", "WrittenArticle"]
