import click
import uvicorn
from core.config import settings

@click.command()
@click.option('--host', default=None, help='Interface to bind (defaults to API_HOST)')
@click.option('--port', default=None, type=int, help='Port to listen on (defaults to API_PORT)')
@click.option('--reload', is_flag=True, help='Restart the server when code changes')
def serve(host, port, reload):
    """Run the HTTP API"""
    host = host or settings.api_host
    port = port or settings.api_port
    click.echo(click.style(f"Serving Virtual Library API on http://{host}:{port}", fg='blue'))
    uvicorn.run(
        "api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower()
    )
