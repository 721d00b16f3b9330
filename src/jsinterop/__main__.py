from jsinterop.cli import main

raise SystemExit(main())
