"""
symdoc Server - queue documentation runs and serve the generated Markdown
"""

import queue
import re
import threading
import uuid
from pathlib import Path
from typing import Dict, Optional

from flask import Flask, Response, jsonify, request

from symdoc import logger
from symdoc.config import DEFAULT_OUTPUT_DIR, DEFAULT_SYMBOL_GRAPHS_DIR, GenerationConfig
from symdoc.doc_processor import DocProcessor
from symdoc.generation_request import GenerationRequest
from symdoc.parsers import SymbolGraphDirectoryError, SymbolGraphLoader
from symdoc.result import Result, ResultStatus
from symdoc.tool_config import ToolConfig

app = Flask(__name__)

# Global queue for async processing
generation_queue = queue.Queue()
results: Dict[str, Result] = {}  # Store results by request id

# Configuration
tool_config = ToolConfig()
CONFIG = {
    'workspace': tool_config.workspace,
    'package_dir': tool_config.workspace,
    'symbol_graphs_dir': tool_config.workspace / DEFAULT_SYMBOL_GRAPHS_DIR,
    'output_dir': tool_config.workspace / DEFAULT_OUTPUT_DIR,
}

_MODULE_NAME_RE = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')

_processor: Optional[DocProcessor] = None
_worker_thread: Optional[threading.Thread] = None


def get_processor() -> DocProcessor:
    global _processor
    if _processor is None:
        _processor = DocProcessor()
    return _processor


def process_request(generation_request: GenerationRequest) -> Result:
    """Run one queued request and record its result."""
    results[generation_request.id] = Result(
        status=ResultStatus.PROCESSING,
        message='Generating documentation...'
    )
    try:
        result = get_processor().process(generation_request)
    except Exception as e:
        logger.exception(f"Error processing request {generation_request.id}: {e}")
        result = Result(status=ResultStatus.ERROR, message=str(e))

    logger.info(f"Request {generation_request.id} result: {result.status} - {result.message}")
    print(f"=== Generation result: {result.status.value} - {result.message} ===")
    results[generation_request.id] = result
    return result


def generation_worker():
    """Worker thread for processing generation requests"""
    logger.info("generation_worker starting")
    print("=== generation_worker starting ===")

    while True:
        try:
            generation_request = generation_queue.get(timeout=1)
        except queue.Empty:
            continue

        logger.info(f"Dequeued request for processing: {generation_request.id}")
        print(f"=== Processing request: {generation_request.id} ===")
        try:
            process_request(generation_request)
        finally:
            generation_queue.task_done()


def start_worker() -> threading.Thread:
    global _worker_thread
    if _worker_thread is None or not _worker_thread.is_alive():
        _worker_thread = threading.Thread(target=generation_worker, daemon=True)
        _worker_thread.start()
    return _worker_thread


@app.route('/api/generate', methods=['POST'])
def submit_generation():
    """Queue a documentation run"""
    data = request.get_json(silent=True) or {}
    logger.debug(f"Received generation request: {data}")

    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    if not isinstance(data.get('config', {}), dict):
        return jsonify({'error': "'config' must be a JSON object"}), 400

    settings = {
        'package_dir': CONFIG['package_dir'],
        'symbol_graphs_dir': CONFIG['symbol_graphs_dir'],
        'output_dir': CONFIG['output_dir'],
    }
    settings.update(data.get('config', {}))
    try:
        config = GenerationConfig.from_dict(settings)
    except (TypeError, ValueError) as e:
        return jsonify({'error': str(e)}), 400

    request_id = str(uuid.uuid4())
    generation_request = GenerationRequest(
        id=request_id,
        config=config,
        description=data.get('description', '')
    )

    results[request_id] = Result(
        status=ResultStatus.QUEUED,
        message='Generation queued for processing'
    )
    generation_queue.put(generation_request)
    logger.info(f"Queued generation request {request_id}")

    return jsonify({
        'id': request_id,
        'description': generation_request.description,
        'config': config.to_dict()
    })


@app.route('/api/generate/<request_id>/status')
def get_generation_status(request_id):
    """Get the status of a specific run"""
    if request_id in results:
        return jsonify(results[request_id].to_dict())
    return jsonify({'status': 'not_found'}), 404


@app.route('/api/queue/status')
def get_queue_status():
    """Get overall queue status"""
    return jsonify({
        'queue_size': generation_queue.qsize(),
        'results': {k: v.to_dict() for k, v in results.items()}
    })


@app.route('/api/modules')
def get_modules():
    """
    List the modules that have symbol graphs.

    Query parameters:
        - symbol_graphs_dir: Directory to inspect (default: the server's symbol graphs dir)
    """
    symbol_graphs_dir = Path(request.args.get('symbol_graphs_dir', CONFIG['symbol_graphs_dir']))
    try:
        modules = SymbolGraphLoader(symbol_graphs_dir).discover_modules()
    except SymbolGraphDirectoryError as e:
        return jsonify({'error': str(e)}), 404

    return jsonify({
        'symbol_graphs_dir': str(symbol_graphs_dir),
        'count': len(modules),
        'modules': modules
    })


@app.route('/api/docs/<module>')
def get_module_docs(module):
    """Serve a generated module document as plain text"""
    if not _MODULE_NAME_RE.match(module):
        return jsonify({'error': f'Invalid module name: {module}'}), 400

    doc_path = Path(CONFIG['output_dir']) / f"{module}.md"
    if not doc_path.is_file():
        return jsonify({'error': f'No documentation generated for {module}'}), 404

    return Response(doc_path.read_text(encoding='utf-8'), mimetype='text/plain')


if __name__ == '__main__':
    start_worker()
    app.run(debug=False, host='0.0.0.0', port=5000, use_reloader=False)
