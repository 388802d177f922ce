from shenv.cli import main

raise SystemExit(main())
