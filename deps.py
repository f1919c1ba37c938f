"""Centralized imports for the entire project (app + baseline_checker)."""

# Standard library
import os
import threading
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

# External
from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, PlainTextResponse
from openai import OpenAI
