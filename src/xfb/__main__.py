from xfb.cli import main

raise SystemExit(main())
