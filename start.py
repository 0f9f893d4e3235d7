#!/usr/bin/env python3
"""
Launch the Streamlit UI after checking imports and the Groq API key.
"""

import os
import sys
import subprocess

from dotenv import load_dotenv

# Import names, not distribution names
REQUIRED_MODULES = ['streamlit', 'pdfplumber', 'pypdf', 'docx', 'groq', 'pydantic', 'yaml']


def missing_modules():
    missing = []
    for module in REQUIRED_MODULES:
        try:
            __import__(module)
        except ImportError:
            missing.append(module)
    return missing


def main():
    print("📑 Contract Insurance Provision Analyzer")

    missing = missing_modules()
    if missing:
        print(f"❌ Missing modules: {', '.join(missing)}")
        print("   Run: pip install -e .")
        sys.exit(1)

    load_dotenv()
    if not os.environ.get('GROQ_API_KEY'):
        print("❌ GROQ_API_KEY is not set; add GROQ_API_KEY=<key> to .env")
        sys.exit(1)

    print("🚀 Starting Streamlit on http://localhost:8501 (Ctrl+C to stop)")
    try:
        subprocess.run([sys.executable, "-m", "streamlit", "run", "app.py"], check=False)
    except KeyboardInterrupt:
        print("\n👋 Stopped")


if __name__ == "__main__":
    main()
