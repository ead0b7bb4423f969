from .use_cli import main

raise SystemExit(main())
