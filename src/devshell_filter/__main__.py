from devshell_filter.cli import main

raise SystemExit(main())
