"""Infrastructure: configuration, logging, caching and the Notion client."""
