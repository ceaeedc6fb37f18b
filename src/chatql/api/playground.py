"""GraphQL Playground page served on GET /graphql."""

EXAMPLE_OPERATIONS = """# Welcome to the GraphQL OpenAI service!
# A few example operations:

# Health check
query HealthCheck {
  health
}

# Basic chat
mutation BasicChat {
  chat(
    messages: [
      { role: "system", content: "You are a helpful assistant." }
      { role: "user", content: "Hi! Please introduce yourself." }
    ]
    model: "gpt-3.5-turbo"
    temperature: 0.7
    max_tokens: 500
  ) {
    id
    model
    message {
      role
      content
    }
    usage {
      prompt_tokens
      completion_tokens
      total_tokens
    }
  }
}

# Chat with sampling parameters
mutation AdvancedChat {
  chat(
    messages: [
      { role: "user", content: "Write a short poem about spring." }
    ]
    model: "gpt-4"
    temperature: 0.8
    max_tokens: 300
    top_p: 0.9
    frequency_penalty: 0.1
    presence_penalty: 0.1
  ) {
    id
    model
    message {
      role
      content
    }
    usage {
      prompt_tokens
      completion_tokens
      total_tokens
    }
  }
}
"""

_PLAYGROUND_CDN = "https://cdn.jsdelivr.net/npm/graphql-playground-react@1.7.26/build"


def render_playground(endpoint: str = "/graphql") -> str:
    """Render the Playground HTML page.

    Args:
        endpoint: GraphQL endpoint the page talks to

    Returns:
        HTML document
    """
    # Backticks would end the JS template literal holding the query
    query = EXAMPLE_OPERATIONS.replace("\\", "\\\\").replace("`", "\\`")

    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8" />
  <title>GraphQL Playground</title>
  <link rel="stylesheet" href="{_PLAYGROUND_CDN}/static/css/index.css" />
  <link rel="shortcut icon" href="{_PLAYGROUND_CDN}/favicon.png" />
  <script src="{_PLAYGROUND_CDN}/static/js/middleware.js"></script>
</head>
<body>
  <div id="root">
    <style>
      body {{ margin: 0; font-family: "Open Sans", sans-serif; overflow: hidden; }}
      #root {{ height: 100vh; }}
    </style>
  </div>
  <script>
    window.addEventListener('load', function (event) {{
      GraphQLPlayground.init(document.getElementById('root'), {{
        endpoint: '{endpoint}',
        settings: {{
          'editor.theme': 'dark',
          'editor.reuseHeaders': true,
          'tracing.hideTracingResponse': true,
          'editor.fontSize': 14,
        }},
        tabs: [{{
          endpoint: '{endpoint}',
          query: `{query}`,
        }}]
      }})
    }})
  </script>
</body>
</html>"""
