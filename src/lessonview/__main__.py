"""Allow running as: python -m lessonview"""

from .main import main

if __name__ == '__main__':
    main()
