from viewer_axes.cli import main

raise SystemExit(main())
